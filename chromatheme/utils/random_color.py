from typing import List, Optional
import numpy as np


def get_range(minimum: int, maximum: int, rng: Optional[np.random.Generator] = None) -> int:
    """Random integer in the inclusive range ``[minimum, maximum]``."""
    if minimum > maximum:
        raise ValueError(f"Empty range: {minimum} > {maximum}")
    if rng is None:
        rng = np.random.default_rng()
    return int(rng.integers(minimum, maximum, endpoint=True))


def generate_random_color(rng: Optional[np.random.Generator] = None) -> List[int]:
    """Random RGB triple with every channel in ``[1, 255]``."""
    if rng is None:
        rng = np.random.default_rng()
    return [get_range(1, 255, rng) for _ in range(3)]
