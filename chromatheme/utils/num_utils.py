from typing import Iterable, List, Union
import numpy as np

from ..types.color_types import Scalar


def round_half_up(
    value: Union[Scalar, np.ndarray],
    decimals: int = 0,
) -> Union[float, np.ndarray]:
    """Round .5 away from the lower step, unlike numpy's banker's rounding."""
    scale = 10.0 ** decimals
    return np.floor(np.asarray(value, dtype=float) * scale + 0.5) / scale


def normalize(values: Iterable[Union[Scalar, str]]) -> List[int]:
    """
    Coerce converted channel values to clean integers.

    Entries may be fractional or string-typed (``"92"``, ``" 92 "``, ``"91.6"``);
    each one is parsed as a float and rounded half-up.

    Raises:
        ValueError: when an entry cannot be read as a number
    """
    numbers = np.array([float(v) for v in values], dtype=float)
    return [int(v) for v in round_half_up(numbers)]
