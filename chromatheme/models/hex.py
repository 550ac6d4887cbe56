from typing import ClassVar

from ..config import HEX_DIGITS
from ..types.color_model import ColorModel
from ..types.color_types import ColorValue
from .base import ModelProperties, unwrap_singleton


class HexProperties(ModelProperties):
    model:        ClassVar[ColorModel] = ColorModel.HEX
    input_length: ClassVar[int] = 1
    maxima:       ClassVar[int] = HEX_DIGITS
    input_type:   ClassVar[str] = "text"

    @classmethod
    def to_string(cls, color: ColorValue) -> str:
        return f"#{unwrap_singleton(color)}"
