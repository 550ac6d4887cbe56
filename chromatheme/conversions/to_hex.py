import numpy as np

from ..types.color_types import ChannelVector, element_to_array
from ..utils.num_utils import round_half_up
from .to_rgb import hsl_to_rgb, cmyk_to_rgb


def rgb_to_hex(value: ChannelVector) -> str:
    """
    ``[51, 102, 153]`` to ``"336699"``: upper-case, no ``#``.

    Channels are written as given, so an out-of-range channel produces a
    string that fails hex validation instead of a silently clamped color.
    """
    channels = round_half_up(element_to_array(value)).astype(int)
    return "".join(f"{int(v):02X}" for v in channels)


def hsl_to_hex(value: ChannelVector) -> str:
    return rgb_to_hex(hsl_to_rgb(value))


def cmyk_to_hex(value: ChannelVector) -> str:
    return rgb_to_hex(cmyk_to_rgb(value))
