"""Parsing and formatting of gradient anchor strings."""
import re
from typing import List
import numpy as np

from ..config import RGB_MAX
from ..conversions import hex_to_rgb, rgb_to_hex
from ..types.color_types import GradientFormat
from ..utils.num_utils import round_half_up

_RGB_STRING = re.compile(r"^\s*rgb\(\s*([^,]+),\s*([^,]+),\s*([^,)]+)\)\s*$", re.IGNORECASE)


def parse_color(color: str, input_format: GradientFormat) -> np.ndarray:
    """
    Read ``"#336699"`` (hex) or ``"rgb(51, 102, 153)"`` (rgb) into a float RGB array.

    Raises:
        ValueError: if the string does not match ``input_format``
    """
    if input_format == "hex":
        rgb = hex_to_rgb(color)
        if rgb is None:
            raise ValueError(f"Expected six hex digits, got {color!r}")
        return np.array(rgb, dtype=float)
    if input_format == "rgb":
        match = _RGB_STRING.match(color)
        if match is None:
            raise ValueError(f"Expected rgb(r, g, b), got {color!r}")
        return np.array([float(v) for v in match.groups()], dtype=float)
    raise ValueError(f"Unsupported gradient format: {input_format!r}")


def format_color(rgb: np.ndarray, output_format: GradientFormat) -> str:
    channels: List[int] = [int(v) for v in np.clip(round_half_up(rgb), 0, RGB_MAX)]
    if output_format == "hex":
        return f"#{rgb_to_hex(channels)}"
    return f"rgb({channels[0]}, {channels[1]}, {channels[2]})"


def rgb_string(rgb) -> str:
    """``[51, 102, 153]`` to ``"rgb(51, 102, 153)"``."""
    return format_color(np.asarray(rgb, dtype=float), "rgb")
