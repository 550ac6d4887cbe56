"""
Chromatheme Color Model Conversions
===================================

Pairwise converters between hex, RGB, HSL and CMYK plus the facade that
expands one value into a full ColorSet.

Value conventions
-----------------
- hex: six hex digits without ``#`` (``"336699"``); output is upper-case
- rgb: ``[r, g, b]`` integers in 0-255
- hsl: ``[hue, saturation, lightness]`` with hue in degrees, the rest in percent;
  output keeps two decimals
- cmyk: ``[c, m, y, k]`` in percent, two decimals on output

Every non-RGB pair is composed through RGB, so the four fields of a
ColorSet always agree with each other.

Examples
--------
>>> from chromatheme.conversions import color_convert, hex_to_rgb
>>> hex_to_rgb("336699")
[51, 102, 153]
>>> color_convert("hex", "336699").hsl
[210.0, 50.0, 40.0]
>>> color_convert("hex", "336699").cmyk
[66.67, 33.33, 0.0, 40.0]
"""

from .to_rgb import hex_to_rgb, hsl_to_rgb, cmyk_to_rgb
from .to_hex import rgb_to_hex, hsl_to_hex, cmyk_to_hex
from .to_hsl import rgb_to_hsl, hex_to_hsl, cmyk_to_hsl
from .to_cmyk import rgb_to_cmyk, hex_to_cmyk, hsl_to_cmyk
from .converters import CONVERTERS, Converter, get_converter
from .wrapper import color_convert

__all__ = [
    'hex_to_rgb', 'hsl_to_rgb', 'cmyk_to_rgb',
    'rgb_to_hex', 'hsl_to_hex', 'cmyk_to_hex',
    'rgb_to_hsl', 'hex_to_hsl', 'cmyk_to_hsl',
    'rgb_to_cmyk', 'hex_to_cmyk', 'hsl_to_cmyk',
    'CONVERTERS',
    'Converter',
    'get_converter',
    'color_convert',
]
