"""
Raw input validation per color model.

Validation never raises: anything that is not a well-formed value for the
model, including an unknown model tag, is reported as ``False``.

Only upper bounds are checked; negative channel values are accepted.
"""
import logging
import string
from typing import Any

from .models import get_color_properties, unwrap_singleton
from .types.color_model import ColorModel
from .types.color_types import is_channel_vector, is_number

log = logging.getLogger(__name__)

_HEX_DIGITS = frozenset(string.hexdigits)


def _validate_hex(value: Any) -> bool:
    props = get_color_properties(ColorModel.HEX)
    value = unwrap_singleton(value)
    if not isinstance(value, str) or len(value) != props.input_max_length():
        return False
    # int(x, 16) would also take "0x", signs and underscores
    return all(ch in _HEX_DIGITS for ch in value)


def _validate_channels(model: ColorModel, value: Any) -> bool:
    props = get_color_properties(model)
    if not is_channel_vector(value) or len(value) != props.input_length:
        return False
    return all(
        is_number(item) and item <= props.input_max_length(index)
        for index, item in enumerate(value)
    )


def color_validate(model: Any, value: Any) -> bool:
    """
    Check ``value`` against the arity and upper bounds of ``model``.

    Args:
        model: "hex", "rgb", "hsl", "cmyk" or a ColorModel
        value: hex string (bare or as a one-element list) or a channel sequence

    Returns:
        True when the value may be passed to ``color_convert``
    """
    try:
        model = ColorModel(model)
    except ValueError:
        log.debug("unknown color model %r", model)
        return False

    if model is ColorModel.HEX:
        valid = _validate_hex(value)
    else:
        valid = _validate_channels(model, value)

    if not valid:
        log.debug("rejected %s value %r", model.value, value)
    return valid
