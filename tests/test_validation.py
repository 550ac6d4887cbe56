import numpy as np
import pytest

from chromatheme.validation import color_validate
from chromatheme.types.color_model import ColorModel


@pytest.mark.parametrize("value", ["336699", "000000", "ffffff", "AbCdEf", ["336699"], ("FFFFFF",)])
def test_hex_valid(value):
    assert color_validate("hex", value) is True


@pytest.mark.parametrize(
    "value",
    ["33669", "3366990", "GGGGGG", "#33669", "0x3366", "-33669", "33 669", "", 336699, None, ["33", "66"], [336699]],
)
def test_hex_invalid(value):
    assert color_validate("hex", value) is False


def test_rgb_bounds():
    assert color_validate("rgb", [0, 0, 0])
    assert color_validate("rgb", [255, 255, 255])
    assert color_validate("rgb", (12.5, 0, 255))
    assert color_validate("rgb", np.array([1, 2, 3]))
    assert not color_validate("rgb", [256, 0, 0])


def test_negative_channels_pass():
    assert color_validate("rgb", [-1, 0, 0])
    assert color_validate("hsl", [-10, -1, 0])
    assert color_validate("cmyk", [-1, 0, 0, 0])


def test_rgb_shape_and_types():
    assert not color_validate("rgb", [0, 0])
    assert not color_validate("rgb", [0, 0, 0, 0])
    assert not color_validate("rgb", ["0", 0, 0])
    assert not color_validate("rgb", [True, 0, 0])
    assert not color_validate("rgb", [None, 0, 0])
    assert not color_validate("rgb", "000")
    assert not color_validate("rgb", 0)


def test_hsl_bounds_by_position():
    assert color_validate("hsl", [360, 100, 100])
    assert color_validate(ColorModel.HSL, [359.5, 0, 0])
    assert not color_validate("hsl", [361, 0, 0])
    assert not color_validate("hsl", [0, 101, 0])
    assert not color_validate("hsl", [0, 0, 101])
    assert not color_validate("hsl", [100, 360, 0])


def test_cmyk():
    assert color_validate("cmyk", [0, 0, 0, 100])
    assert color_validate("cmyk", [100, 100, 100, 100])
    assert not color_validate("cmyk", [101, 0, 0, 0])
    assert not color_validate("cmyk", [0, 0, 0])
    assert not color_validate("cmyk", [0, 0, 0, 0, 0])


def test_unknown_model_is_not_valid():
    assert color_validate("lab", [50, 0, 0]) is False
    assert color_validate(None, "336699") is False
