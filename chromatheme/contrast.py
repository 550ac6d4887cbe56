"""
Foreground/background contrast.

Two independent measures:

- ``yiq_contrast_ratio``: a luma-weighted brightness score deciding whether
  black or white content belongs on a background.
- ``get_luminance`` / ``calculate_contrast``: WCAG 2.x relative luminance and
  the pass/fail flags derived from the contrast ratio.

``calculate_contrast`` keeps its historical comparisons: ``aa_lvl_lg`` tests
against 3:1 and ``aaa_lvl_lg`` against 4.5:1, the reverse of the usual
large/small-text naming.
"""
from __future__ import annotations
from dataclasses import dataclass
import math
from typing import Dict, Optional, Union
import numpy as np

from . import config as c
from .conversions import color_convert
from .types.color_model import ColorModel
from .types.color_types import ChannelVector, ContrastColor, element_to_array


@dataclass(frozen=True)
class ContrastResult:
    yiq: float
    result: ContrastColor


@dataclass(frozen=True)
class WcagLevels:
    """Pass flags for one foreground/background pair; ``ratio`` is always <= 1."""

    ratio: float
    aa_lvl_lg: bool
    aa_lvl_sm: bool
    aaa_lvl_lg: bool
    aaa_lvl_sm: bool

    def as_dict(self) -> Dict[str, bool]:
        return {
            "aa_lvl_lg": self.aa_lvl_lg,
            "aa_lvl_sm": self.aa_lvl_sm,
            "aaa_lvl_lg": self.aaa_lvl_lg,
            "aaa_lvl_sm": self.aaa_lvl_sm,
        }


def yiq_contrast_color(yiq: float) -> ContrastColor:
    return "black" if yiq >= c.YIQ_THRESHOLD else "white"


def yiq_contrast_ratio(rgb: Optional[ChannelVector]) -> ContrastResult:
    """
    YIQ brightness of an RGB triple and the content color it calls for.

    A color with no RGB reading (``None``) scores NaN and gets white content.

    >>> yiq_contrast_ratio([255, 255, 255])
    ContrastResult(yiq=255.0, result='black')
    """
    if rgb is None:
        return ContrastResult(yiq=math.nan, result=yiq_contrast_color(math.nan))
    r, g, b = rgb
    yiq = (r * c.YIQ_R + g * c.YIQ_G + b * c.YIQ_B) / c.YIQ_DIVISOR
    return ContrastResult(yiq=yiq, result=yiq_contrast_color(yiq))


def get_luminance(rgb: Optional[ChannelVector]) -> float:
    """WCAG relative luminance of a 0-255 RGB triple, in ``[0, 1]``; NaN for ``None``."""
    if rgb is None:
        return math.nan
    v = element_to_array(rgb) / c.RGB_MAX
    linear = np.where(
        v <= c.SRGB_TO_LINEAR_TH,
        v / c.SRGB_SLOPE,
        ((v + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA,
    )
    return float(linear @ np.array([c.LUMA_R, c.LUMA_G, c.LUMA_B]))


def _as_rgb(color: Union[str, ChannelVector]) -> Optional[ChannelVector]:
    if isinstance(color, str):
        return color_convert(ColorModel.HEX, color).rgb
    return color


def calculate_contrast(
    foreground: Union[str, ChannelVector],
    background: Union[str, ChannelVector],
) -> WcagLevels:
    """
    WCAG contrast flags between two colors.

    Args:
        foreground: RGB triple or hex string
        background: RGB triple or hex string

    Returns:
        WcagLevels; the ratio is darker over lighter so argument order does
        not matter. A hex string with no RGB reading gives a NaN ratio
        that passes no level.
    """
    fg_luminance = get_luminance(_as_rgb(foreground))
    bg_luminance = get_luminance(_as_rgb(background))

    lighter = float(np.maximum(fg_luminance, bg_luminance))
    darker = float(np.minimum(fg_luminance, bg_luminance))
    ratio = (darker + c.LUMINANCE_FLARE) / (lighter + c.LUMINANCE_FLARE)

    return WcagLevels(
        ratio=ratio,
        aa_lvl_lg=ratio < 1 / c.WCAG_AA_LARGE,
        aa_lvl_sm=ratio < 1 / c.WCAG_AA_NORMAL,
        aaa_lvl_lg=ratio < 1 / c.WCAG_AAA_LARGE,
        aaa_lvl_sm=ratio < 1 / c.WCAG_AAA_NORMAL,
    )
