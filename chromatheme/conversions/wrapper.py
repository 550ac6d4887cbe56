import logging

from ..types.color_model import ALL_MODELS, ColorModel
from ..types.color_set import ColorSet
from ..types.color_types import ColorValue, ModelLike
from .converters import get_converter

log = logging.getLogger(__name__)


def color_convert(model: ModelLike, value: ColorValue) -> ColorSet:
    """
    Express ``value`` (given in ``model``) in all four models.

    The input is stored verbatim under its own key; the other three fields
    come from the pairwise converters, and equality ignores the case of hex
    digits. Nothing is validated here, so run
    ``color_validate`` first.

    Args:
        model: "hex", "rgb", "hsl", "cmyk" or a ColorModel
        value: six-digit hex string or a channel sequence

    Returns:
        ColorSet with every field populated; a malformed hex input leaves
        the three derived fields ``None``

    Raises:
        ValueError: for an unknown model tag
    """
    source = ColorModel(model)
    fields = {
        target.value: value if target is source else get_converter(source, target)(value)
        for target in ALL_MODELS
    }
    log.debug("converted %s %r -> %r", source.value, value, fields)
    return ColorSet(**fields)
