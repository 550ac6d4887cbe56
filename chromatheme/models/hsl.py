from typing import ClassVar, Optional, Tuple, Union

from ..config import HUE_MAX, PERCENT_MAX
from ..types.color_model import ColorModel
from .base import ModelProperties


class HSLProperties(ModelProperties):
    model:        ClassVar[ColorModel] = ColorModel.HSL
    input_length: ClassVar[int] = 3
    maxima:       ClassVar[Tuple[int, int, int]] = (HUE_MAX, PERCENT_MAX, PERCENT_MAX)

    @classmethod
    def input_max_length(cls, index: Optional[int] = None) -> Union[int, Tuple[int, int, int]]:
        """Hue is bounded by 360, saturation and lightness by 100; no index returns all three."""
        if index is None:
            return cls.maxima
        return cls.maxima[index]
