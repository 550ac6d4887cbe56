from __future__ import annotations
from math import comb
from typing import List, Sequence
import numpy as np

from ..types.color_types import GradientFormat
from .color_utils import parse_color, format_color


def bezier_weights(u: np.ndarray, degree: int) -> np.ndarray:
    """Bernstein basis of ``degree`` at every ``u``; shape ``(len(u), degree + 1)``."""
    i = np.arange(degree + 1)
    coeffs = np.array([comb(degree, k) for k in i], dtype=float)
    return coeffs * (u[:, None] ** i) * ((1.0 - u[:, None]) ** (degree - i))


def gradstop(
    stops: int,
    input_format: GradientFormat,
    color_array: Sequence[str],
) -> List[str]:
    """
    Interpolate ``stops`` colors along a Bezier curve through the anchors.

    Two anchors give a straight blend, three a quadratic curve and so on.
    The first and last stops equal the first and last anchors; the middle
    anchors pull the curve without being hit exactly.

    Args:
        stops: Number of colors to produce
        input_format: "hex" or "rgb"; the output uses the same notation
        color_array: Anchor colors, e.g. ``["#212121", "#336699", "#FFFFFF"]``

    Returns:
        List of ``stops`` color strings

    Raises:
        ValueError: on fewer than two anchors, fewer stops than anchors,
            or an anchor not written in ``input_format``
    """
    if len(color_array) < 2:
        raise ValueError(f"Need at least 2 anchor colors, got {len(color_array)}")
    if stops < len(color_array):
        raise ValueError(f"Number of stops ({stops}) is less than the number of anchors ({len(color_array)})")

    anchors = np.stack([parse_color(color, input_format) for color in color_array])
    u = np.linspace(0.0, 1.0, stops, dtype=float)
    colors = bezier_weights(u, len(anchors) - 1) @ anchors

    return [format_color(color, input_format) for color in colors]
