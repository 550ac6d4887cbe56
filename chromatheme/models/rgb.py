import re
from typing import ClassVar, List

from ..config import RGB_MAX
from ..types.color_model import ColorModel
from ..utils.num_utils import normalize
from .base import ModelProperties

_FUNCTIONAL = re.compile(r"^\s*rgb\((?P<body>[^)]*)\)\s*$", re.IGNORECASE)


class RGBProperties(ModelProperties):
    model:        ClassVar[ColorModel] = ColorModel.RGB
    input_length: ClassVar[int] = 3
    maxima:       ClassVar[int] = RGB_MAX

    @classmethod
    def to_array(cls, color: str) -> List[int]:
        """
        Parse ``"rgb(r, g, b)"`` back into integer channels.

        Raises:
            ValueError: if ``color`` is not in rgb functional notation
        """
        match = _FUNCTIONAL.match(color)
        if match is None:
            raise ValueError(f"Not an rgb() color string: {color!r}")
        return normalize(part for part in match.group("body").split(",") if part.strip())
