from typing import Callable, Dict, Tuple

from ..types.color_model import ColorModel
from ..types.color_types import ColorValue, ModelLike
from .to_rgb import hex_to_rgb, hsl_to_rgb, cmyk_to_rgb
from .to_hex import rgb_to_hex, hsl_to_hex, cmyk_to_hex
from .to_hsl import rgb_to_hsl, hex_to_hsl, cmyk_to_hsl
from .to_cmyk import rgb_to_cmyk, hex_to_cmyk, hsl_to_cmyk

Converter = Callable[[ColorValue], ColorValue]

# Every ordered pair of distinct models
CONVERTERS: Dict[Tuple[ColorModel, ColorModel], Converter] = {
    (ColorModel.HEX, ColorModel.RGB): hex_to_rgb,
    (ColorModel.HEX, ColorModel.HSL): hex_to_hsl,
    (ColorModel.HEX, ColorModel.CMYK): hex_to_cmyk,
    (ColorModel.RGB, ColorModel.HEX): rgb_to_hex,
    (ColorModel.RGB, ColorModel.HSL): rgb_to_hsl,
    (ColorModel.RGB, ColorModel.CMYK): rgb_to_cmyk,
    (ColorModel.HSL, ColorModel.HEX): hsl_to_hex,
    (ColorModel.HSL, ColorModel.RGB): hsl_to_rgb,
    (ColorModel.HSL, ColorModel.CMYK): hsl_to_cmyk,
    (ColorModel.CMYK, ColorModel.HEX): cmyk_to_hex,
    (ColorModel.CMYK, ColorModel.RGB): cmyk_to_rgb,
    (ColorModel.CMYK, ColorModel.HSL): cmyk_to_hsl,
}


def get_converter(from_model: ModelLike, to_model: ModelLike) -> Converter:
    key = (ColorModel(from_model), ColorModel(to_model))
    converter = CONVERTERS.get(key)
    if converter is None:
        raise ValueError(f"No conversion from {key[0].value} to {key[1].value}")
    return converter
