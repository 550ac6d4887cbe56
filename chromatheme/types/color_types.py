from __future__ import annotations
from typing import Literal, Sequence, Tuple, Union
from numbers import Real
import numpy as np
from numpy import ndarray

from .color_model import ColorModel

Scalar = int | float
ChannelVector = Union[Sequence[Scalar], ndarray]
ColorValue = Union[str, ChannelVector]
ModelLike = Union[ColorModel, str]
ContrastColor = Literal["black", "white"]
GradientFormat = Literal["hex", "rgb"]


def is_number(item: object) -> bool:
    """True for real numbers, numpy scalars included; ``bool`` is not a channel value."""
    if isinstance(item, (bool, np.bool_)):
        return False
    return isinstance(item, (Real, np.integer, np.floating))


def is_channel_vector(value: object) -> bool:
    """True for the ordered containers a numeric color may arrive in."""
    if isinstance(value, ndarray):
        return value.ndim == 1
    return isinstance(value, (list, tuple))


def element_to_array(element: ChannelVector) -> np.ndarray:
    """
    Convert a channel vector to a float numpy array.

    Args:
        element: list, tuple or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float)
    return np.array(element, dtype=float)
