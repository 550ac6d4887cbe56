"""
Chromatheme - Color Model Conversion and Theme Derivation
=========================================================

Converts a color given as hex, RGB, HSL or CMYK into the other three
models, checks raw input against each model's domain, decides whether
black or white content suits it, and derives a gradient ramp plus named
CSS variables for a dynamic UI theme.

Key Features
------------
- Four color models with a static registry (arity, channel bounds, formatting)
- Input validation that reports instead of raising
- Four-way ColorSet conversion from any one model
- YIQ contrast heuristic and WCAG relative-luminance contrast flags
- Eight-stop gradient ramps and theme variables
- A surface protocol for applying themes without binding to a UI toolkit

Quick Start
-----------
>>> from chromatheme import color_validate, color_convert, generate_css_color
>>>
>>> color_validate("hex", "336699")
True
>>> color_convert("hex", "336699").rgb
[51, 102, 153]
>>>
>>> theme = generate_css_color("hex", "336699")
>>> theme.contrast.result
'white'
>>> len(theme.gradients)
8
"""
import logging

from .types.color_model import ColorModel
from .types.color_set import ColorSet
from .models import get_color_properties
from .validation import color_validate
from .conversions import color_convert, CONVERTERS, get_converter
from .contrast import (
    ContrastResult,
    WcagLevels,
    yiq_contrast_ratio,
    yiq_contrast_color,
    get_luminance,
    calculate_contrast,
)
from .gradients import gradstop
from .theme import Theme, ThemeVariables, generate_gradients, generate_css_color
from .surface import StyleSurface, MemorySurface, apply_theme, calculate_color
from .utils import normalize, get_range, generate_random_color

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # models
    "ColorModel",
    "ColorSet",
    "get_color_properties",
    # validation and conversion
    "color_validate",
    "color_convert",
    "CONVERTERS",
    "get_converter",
    # contrast
    "ContrastResult",
    "WcagLevels",
    "yiq_contrast_ratio",
    "yiq_contrast_color",
    "get_luminance",
    "calculate_contrast",
    # theme
    "gradstop",
    "Theme",
    "ThemeVariables",
    "generate_gradients",
    "generate_css_color",
    "StyleSurface",
    "MemorySurface",
    "apply_theme",
    "calculate_color",
    # helpers
    "normalize",
    "get_range",
    "generate_random_color",
]
