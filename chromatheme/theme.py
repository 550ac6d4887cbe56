"""
Theme derivation: one input color to a full set of UI style variables.

The pipeline is pure. Applying the result to a live surface lives in
``chromatheme.surface``.

When the input does not yield a valid hex value the gradient ramp is empty.
Every value picked from it is then ``None`` and shows up as such in the
declarations and the variable bundle; nothing is raised. A malformed hex
input has no RGB reading either, so the primary color is ``None`` too and
the contrast falls back to white content.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from . import config as c
from .contrast import ContrastResult, yiq_contrast_ratio
from .conversions import color_convert, hex_to_rgb
from .gradients import gradstop, rgb_string
from .models import RGBProperties, unwrap_singleton
from .types.color_model import ColorModel
from .types.color_set import ColorSet
from .types.color_types import ColorValue, ModelLike
from .utils.num_utils import normalize
from .validation import color_validate

log = logging.getLogger(__name__)

RGBTriple = Optional[List[int]]


@dataclass(frozen=True)
class ThemeVariables:
    primary: RGBTriple
    secondary: RGBTriple
    text: RGBTriple
    contrast: RGBTriple


@dataclass(frozen=True)
class Theme:
    """
    Attributes:
        colors: The input color in all four models
        contrast: YIQ decision for the input's RGB value
        gradients: Eight ``rgb(...)`` stops, darkest anchor first; empty for invalid input
        css_variable: ``"--name: value;"`` declarations, six named colors then one
            per gradient stop (``--gradient-100`` is the lightest)
        variable: Numeric RGB triples for primary/secondary/text/contrast
    """

    colors: ColorSet
    contrast: ContrastResult
    gradients: Tuple[str, ...]
    css_variable: Tuple[str, ...]
    variable: ThemeVariables


def generate_gradients(hex_value: ColorValue) -> Tuple[str, ...]:
    """
    Eight-stop ramp around ``hex_value``.

    A hex ramp from a fixed dark gray through the color to white is built
    first; its second and seventh stops then anchor an RGB ramp around the
    color itself, which is what gets returned. Invalid hex gives ``()``.
    """
    if not color_validate(ColorModel.HEX, hex_value):
        log.debug("no gradient for invalid hex %r", hex_value)
        return ()

    hex_value = unwrap_singleton(hex_value)
    hex_result = gradstop(
        stops=c.GRADIENT_STOPS,
        input_format="hex",
        color_array=[c.GRADIENT_DARK_ANCHOR, f"#{hex_value}", c.GRADIENT_LIGHT_ANCHOR],
    )
    return tuple(gradstop(
        stops=c.GRADIENT_STOPS,
        input_format="rgb",
        color_array=[
            rgb_string(hex_to_rgb(hex_result[1])),
            rgb_string(hex_to_rgb(hex_value)),
            rgb_string(hex_to_rgb(hex_result[6])),
        ],
    ))


def _stop(gradients: Sequence[str], index: int) -> Optional[str]:
    return gradients[index] if index < len(gradients) else None


def _transparent(color: Optional[str]) -> Optional[str]:
    if color is None:
        return None
    return color.replace("rgb", "rgba", 1).replace(")", f", {c.DARK_TRANSPARENT_ALPHA})", 1)


def _to_array(color: Optional[str]) -> RGBTriple:
    return None if color is None else RGBProperties.to_array(color)


def _declaration(name: str, value: Any) -> str:
    return f"--{name}: {value};"


def generate_css_color(
    model: Union[ModelLike, Mapping[str, Any]],
    value: Optional[ColorValue] = None,
) -> Theme:
    """
    Derive a complete theme from one color.

    Accepts either ``generate_css_color("hex", "336699")`` or a mapping
    ``generate_css_color({"type": "hex", "value": "336699"})``.

    Args:
        model: Model of ``value``, or a mapping with "type" and "value" keys
        value: Color in that model

    Returns:
        Theme
    """
    if isinstance(model, Mapping):
        model, value = model["type"], model["value"]

    colors = color_convert(model, value)
    contrast = yiq_contrast_ratio(colors.rgb)
    gradients = generate_gradients(colors.hex)
    is_black = contrast.result == "black"

    primary_color = None if colors.rgb is None else RGBProperties.to_string(colors.rgb)
    text_color = _stop(gradients, 7) if is_black else primary_color
    secondary_color = _stop(gradients, 1) if is_black else _stop(gradients, 7)
    dark_color = _stop(gradients, 7) if is_black else _stop(gradients, 1)

    css_variable = [
        _declaration("primary-color", primary_color),
        _declaration("secondary-color", secondary_color),
        _declaration("text-color", text_color),
        _declaration("dark-color", dark_color),
        _declaration("dark-transparent-color", _transparent(dark_color)),
        _declaration("contrast-color", contrast.result),
    ]
    for index, gradient in enumerate(reversed(gradients)):
        css_variable.append(_declaration(f"gradient-{(index + 1) * c.GRADIENT_STEP}", gradient))

    variable = ThemeVariables(
        primary=None if colors.rgb is None else normalize(colors.rgb),
        secondary=_to_array(secondary_color),
        text=_to_array(text_color),
        contrast=list(c.CONTRAST_BLACK_RGB if is_black else c.CONTRAST_WHITE_RGB),
    )

    if not gradients:
        log.debug("theme for %s %r has no gradient ramp", colors.hex, value)

    return Theme(
        colors=colors,
        contrast=contrast,
        gradients=gradients,
        css_variable=tuple(css_variable),
        variable=variable,
    )
