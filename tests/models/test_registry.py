import pytest

from chromatheme.models import (
    get_color_properties,
    HexProperties,
    RGBProperties,
    HSLProperties,
    CMYKProperties,
)
from chromatheme.types.color_model import ALL_MODELS, ColorModel


def test_every_model_resolves():
    for model in ALL_MODELS:
        assert get_color_properties(model).model is model
        assert get_color_properties(model.value).model is model


def test_unknown_model():
    with pytest.raises(ValueError):
        get_color_properties("lab")


def test_arity():
    assert HexProperties.input_length == 1
    assert RGBProperties.input_length == 3
    assert HSLProperties.input_length == 3
    assert CMYKProperties.input_length == 4


def test_channel_bounds():
    assert HexProperties.input_max_length() == 6
    assert RGBProperties.input_max_length() == 255
    assert RGBProperties.input_max_length(2) == 255
    assert CMYKProperties.input_max_length(3) == 100


def test_hsl_bounds_per_channel():
    assert HSLProperties.input_max_length() == (360, 100, 100)
    assert [HSLProperties.input_max_length(i) for i in range(3)] == [360, 100, 100]


def test_input_type():
    assert HexProperties.input_type == "text"
    for props in (RGBProperties, HSLProperties, CMYKProperties):
        assert props.input_type == "number"


def test_properties_are_not_instantiated():
    with pytest.raises(TypeError):
        RGBProperties()
