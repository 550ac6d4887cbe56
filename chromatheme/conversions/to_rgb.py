import logging
import string
from typing import List, Optional
import numpy as np

from ..config import HEX_DIGITS, HUE_MAX, HUE_SECTOR, PERCENT_MAX, RGB_MAX
from ..types.color_types import ChannelVector, ColorValue, element_to_array
from ..models.base import unwrap_singleton
from ..utils.num_utils import round_half_up

log = logging.getLogger(__name__)


def _to_int_channels(unit_rgb: np.ndarray) -> List[int]:
    scaled = np.clip(round_half_up(unit_rgb * RGB_MAX), 0, RGB_MAX)
    return [int(v) for v in scaled]


def hex_to_rgb(value: ColorValue) -> Optional[List[int]]:
    """
    Convert ``"336699"`` (``#`` optional, any case, bare or as a one-element
    list) to ``[51, 102, 153]``.

    Anything that is not six hex digits has no RGB reading and gives ``None``.
    """
    value = unwrap_singleton(value)
    if not isinstance(value, str):
        return None
    digits = value[1:] if value.startswith("#") else value
    if len(digits) != HEX_DIGITS or not all(ch in string.hexdigits for ch in digits):
        log.debug("no rgb reading for hex %r", value)
        return None
    return [int(digits[i:i + 2], 16) for i in range(0, HEX_DIGITS, 2)]


def hsl_to_rgb(value: ChannelVector) -> List[int]:
    """HSL with hue in degrees and saturation/lightness in percent to 0-255 RGB."""
    h, s, l = element_to_array(value)
    h = (h % HUE_MAX) / HUE_SECTOR
    s /= PERCENT_MAX
    l /= PERCENT_MAX

    chroma = (1.0 - abs(2.0 * l - 1.0)) * s
    x = chroma * (1.0 - abs(h % 2.0 - 1.0))
    m = l - chroma / 2.0

    sector = int(h) % 6
    if sector == 0:
        rgb = (chroma, x, 0.0)
    elif sector == 1:
        rgb = (x, chroma, 0.0)
    elif sector == 2:
        rgb = (0.0, chroma, x)
    elif sector == 3:
        rgb = (0.0, x, chroma)
    elif sector == 4:
        rgb = (x, 0.0, chroma)
    else:
        rgb = (chroma, 0.0, x)

    return _to_int_channels(np.array(rgb) + m)


def cmyk_to_rgb(value: ChannelVector) -> List[int]:
    """CMYK in percent to 0-255 RGB."""
    c, m, y, k = element_to_array(value) / PERCENT_MAX
    return _to_int_channels((1.0 - np.array([c, m, y])) * (1.0 - k))
