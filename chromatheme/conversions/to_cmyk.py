from typing import List, Optional
import numpy as np

from ..config import CHANNEL_DECIMALS, PERCENT_MAX, RGB_MAX
from ..types.color_types import ChannelVector, element_to_array
from ..utils.num_utils import round_half_up
from .to_rgb import hex_to_rgb, hsl_to_rgb


def rgb_to_cmyk(value: ChannelVector) -> List[float]:
    """0-255 RGB to CMYK percentages; pure black is ``[0, 0, 0, 100]``."""
    unit = np.clip(element_to_array(value), 0, RGB_MAX) / RGB_MAX
    k = 1.0 - unit.max()
    if k >= 1.0:
        cmy = np.zeros(3)
    else:
        cmy = (1.0 - unit - k) / (1.0 - k)
    return [float(v) for v in round_half_up(np.append(cmy, k) * PERCENT_MAX, CHANNEL_DECIMALS)]


def hex_to_cmyk(value: str) -> Optional[List[float]]:
    rgb = hex_to_rgb(value)
    return None if rgb is None else rgb_to_cmyk(rgb)


def hsl_to_cmyk(value: ChannelVector) -> List[float]:
    return rgb_to_cmyk(hsl_to_rgb(value))
