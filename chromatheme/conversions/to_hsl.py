from typing import List, Optional
import numpy as np

from ..config import CHANNEL_DECIMALS, HUE_MAX, HUE_SECTOR, PERCENT_MAX, RGB_MAX
from ..types.color_types import ChannelVector, element_to_array
from ..utils.num_utils import round_half_up
from .to_rgb import hex_to_rgb, cmyk_to_rgb


def rgb_to_hsl(value: ChannelVector) -> List[float]:
    """0-255 RGB to ``[hue, saturation %, lightness %]`` to two decimals."""
    r, g, b = np.clip(element_to_array(value), 0, RGB_MAX) / RGB_MAX
    maxc = max(r, g, b)
    minc = min(r, g, b)
    l = (maxc + minc) / 2.0

    if maxc == minc:
        h = s = 0.0
    else:
        delta = maxc - minc
        s = delta / (2.0 - maxc - minc) if l > 0.5 else delta / (maxc + minc)
        if maxc == r:
            h = ((g - b) / delta) % 6.0
        elif maxc == g:
            h = (b - r) / delta + 2.0
        else:
            h = (r - g) / delta + 4.0
        h *= HUE_SECTOR

    hue, sat, light = round_half_up(
        np.array([h, s * PERCENT_MAX, l * PERCENT_MAX]), CHANNEL_DECIMALS
    )
    return [float(hue % HUE_MAX), float(sat), float(light)]


def hex_to_hsl(value: str) -> Optional[List[float]]:
    rgb = hex_to_rgb(value)
    return None if rgb is None else rgb_to_hsl(rgb)


def cmyk_to_hsl(value: ChannelVector) -> List[float]:
    return rgb_to_hsl(cmyk_to_rgb(value))
