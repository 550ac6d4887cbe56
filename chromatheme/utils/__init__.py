from .num_utils import normalize, round_half_up
from .random_color import get_range, generate_random_color

__all__ = [
    "normalize",
    "round_half_up",
    "get_range",
    "generate_random_color",
]
