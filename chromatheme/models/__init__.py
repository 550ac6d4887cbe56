"""
Color Model Registry
====================

Static metadata for the four supported models: arity, per-channel upper
bound, UI input kind and display formatting.

>>> from chromatheme.models import get_color_properties
>>> rgb = get_color_properties("rgb")
>>> rgb.input_length
3
>>> rgb.to_string([51, 102, 153])
'rgb(51, 102, 153)'
>>> rgb.to_array("rgb(51, 102, 153)")
[51, 102, 153]
>>> get_color_properties("hsl").input_max_length(0)
360
"""

from typing import assert_never

from ..types.color_model import ColorModel
from ..types.color_types import ModelLike
from .base import ModelProperties, unwrap_singleton
from .hex import HexProperties
from .rgb import RGBProperties
from .hsl import HSLProperties
from .cmyk import CMYKProperties


def get_color_properties(model: ModelLike) -> type[ModelProperties]:
    """
    Resolve a model tag to its properties class.

    Raises:
        ValueError: for a tag outside hex/rgb/hsl/cmyk
    """
    model = ColorModel(model)
    match model:
        case ColorModel.HEX:
            return HexProperties
        case ColorModel.RGB:
            return RGBProperties
        case ColorModel.HSL:
            return HSLProperties
        case ColorModel.CMYK:
            return CMYKProperties
        case _:
            assert_never(model)


__all__ = [
    "ModelProperties",
    "HexProperties",
    "RGBProperties",
    "HSLProperties",
    "CMYKProperties",
    "get_color_properties",
    "unwrap_singleton",
]
