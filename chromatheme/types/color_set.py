from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Tuple

from .color_model import ColorModel
from .color_types import ColorValue, ModelLike


@dataclass(frozen=True, eq=False)
class ColorSet:
    """
    One logical color in all four models at once.

    The hex field keeps whatever case it was given in, so two sets compare
    equal when their hex digits match in any case.
    """

    hex: ColorValue
    rgb: ColorValue
    hsl: ColorValue
    cmyk: ColorValue

    def get(self, model: ModelLike) -> ColorValue:
        return getattr(self, ColorModel(model).value)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def _key(self) -> Tuple[Any, ...]:
        hex_value = self.hex.upper() if isinstance(self.hex, str) else self.hex
        return (hex_value, self.rgb, self.hsl, self.cmyk)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorSet):
            return NotImplemented
        return self._key() == other._key()
