from typing import ClassVar

from ..config import PERCENT_MAX
from ..types.color_model import ColorModel
from .base import ModelProperties


class CMYKProperties(ModelProperties):
    model:        ClassVar[ColorModel] = ColorModel.CMYK
    input_length: ClassVar[int] = 4
    maxima:       ClassVar[int] = PERCENT_MAX
