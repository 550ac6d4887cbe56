from __future__ import annotations
from typing import ClassVar, Optional, Tuple, Union

from ..types.color_model import ColorModel
from ..types.color_types import ChannelVector, ColorValue, Scalar
from ..utils.num_utils import normalize


class ModelProperties:
    """
    Static metadata for one color model.

    Subclasses are never instantiated; the registry hands out the classes
    themselves and every helper is a classmethod.
    """

    model:        ClassVar[ColorModel]
    input_length: ClassVar[int]
    maxima:       ClassVar[Union[Scalar, Tuple[Scalar, ...]]]
    input_type:   ClassVar[str] = "number"

    def __init__(self) -> None:
        raise TypeError(f"{self.__class__.__name__} is a static registry entry")

    @classmethod
    def input_max_length(cls, index: Optional[int] = None) -> Union[Scalar, Tuple[Scalar, ...]]:
        """Upper bound of channel ``index``; the same bound for every channel here."""
        return cls.maxima

    @classmethod
    def to_string(cls, color: ColorValue) -> str:
        return f"{cls.model.value}({', '.join(str(v) for v in normalize(color))})"


def unwrap_singleton(color: Union[ColorValue, ChannelVector]) -> ColorValue:
    """Hex input may arrive as ``"336699"`` or ``["336699"]``."""
    if isinstance(color, (list, tuple)) and len(color) == 1:
        return color[0]
    return color
