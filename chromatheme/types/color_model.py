# No dependencies
from enum import Enum


class ColorModel(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    CMYK = "cmyk"


ALL_MODELS = (ColorModel.HEX, ColorModel.RGB, ColorModel.HSL, ColorModel.CMYK)
