import numpy as np
import pytest

from chromatheme.conversions import (
    CONVERTERS,
    get_converter,
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_cmyk,
    cmyk_to_rgb,
    hex_to_hsl,
    hex_to_cmyk,
    hsl_to_cmyk,
)
from chromatheme.types.color_model import ALL_MODELS, ColorModel
from tests.samples import samples_all


def test_every_ordered_pair_has_a_converter():
    pairs = {(a, b) for a in ALL_MODELS for b in ALL_MODELS if a is not b}
    assert set(CONVERTERS) == pairs


def test_get_converter_accepts_strings():
    assert get_converter("hex", "rgb") is hex_to_rgb
    assert get_converter(ColorModel.RGB, "hex") is rgb_to_hex


def test_get_converter_rejects_self_and_unknown():
    with pytest.raises(ValueError):
        get_converter("rgb", "rgb")
    with pytest.raises(ValueError):
        get_converter("rgb", "lab")


def test_hex_to_rgb():
    for hex_value, (rgb, _, _) in samples_all.items():
        assert hex_to_rgb(hex_value) == rgb


def test_hex_to_rgb_prefix_case_and_singleton():
    assert hex_to_rgb("#336699") == [51, 102, 153]
    assert hex_to_rgb("ffffff") == [255, 255, 255]
    assert hex_to_rgb(["336699"]) == [51, 102, 153]


def test_hex_to_rgb_malformed_gives_none():
    for value in ("33669", "GGGGGG", "#12345G", "", 336699, ["33669"]):
        assert hex_to_rgb(value) is None
    assert hex_to_hsl("GGGGGG") is None
    assert hex_to_cmyk("33669") is None


def test_rgb_to_hex():
    for hex_value, (rgb, _, _) in samples_all.items():
        assert rgb_to_hex(rgb) == hex_value
    assert rgb_to_hex(np.array([51, 102, 153])) == "336699"
    assert rgb_to_hex((51.4, 101.6, 153)) == "336699"


def test_rgb_to_hex_keeps_out_of_range_visible():
    assert rgb_to_hex([256, 0, 0]) == "1000000"
    assert rgb_to_hex([-5, 0, 0]).startswith("-")


def test_rgb_hsl():
    for _, (rgb, hsl, _) in samples_all.items():
        assert rgb_to_hsl(rgb) == hsl
        assert hsl_to_rgb(hsl) == rgb


def test_hsl_hue_wraps():
    assert hsl_to_rgb([360, 100, 50]) == [255, 0, 0]


def test_rgb_cmyk():
    for _, (rgb, _, cmyk) in samples_all.items():
        assert rgb_to_cmyk(rgb) == cmyk
        assert cmyk_to_rgb(cmyk) == rgb


def test_cmyk_to_rgb_within_one_unit():
    assert np.allclose(cmyk_to_rgb([67, 33, 0, 40]), [51, 102, 153], atol=1)


def test_composed_converters_go_through_rgb():
    assert hex_to_hsl("336699") == rgb_to_hsl(hex_to_rgb("336699"))
    assert hsl_to_cmyk([210, 50, 40]) == rgb_to_cmyk(hsl_to_rgb([210, 50, 40]))


def test_hsl_and_cmyk_keep_two_decimals():
    assert rgb_to_hsl([0, 0, 125]) == [240.0, 100.0, 24.51]
    assert hsl_to_rgb(rgb_to_hsl([0, 0, 125])) == [0, 0, 125]
    assert rgb_to_cmyk([0, 95, 200]) == [100.0, 52.5, 0.0, 21.57]
    assert cmyk_to_rgb(rgb_to_cmyk([0, 95, 200])) == [0, 95, 200]
