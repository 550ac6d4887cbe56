"""
Binding a Theme to a live style surface.

The theme pipeline never touches a surface itself. Anything that can take
a block of CSS declarations and toggle a class (a DOM body proxy, a Qt
stylesheet adapter, a test double) implements ``StyleSurface`` and is
handed to ``apply_theme``. Callers are expected to drive one surface from
one thread at a time.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol, Set, runtime_checkable

from . import config as c
from .theme import Theme, generate_css_color
from .types.color_types import ColorValue, ModelLike

log = logging.getLogger(__name__)


@runtime_checkable
class StyleSurface(Protocol):
    def set_css_text(self, text: str) -> None: ...
    def append_css_text(self, text: str) -> None: ...
    def add_class(self, name: str) -> None: ...
    def remove_class(self, name: str) -> None: ...


@dataclass
class MemorySurface:
    """In-memory StyleSurface; keeps the applied CSS text and class list."""

    css_text: str = ""
    classes: Set[str] = field(default_factory=set)

    def set_css_text(self, text: str) -> None:
        self.css_text = text

    def append_css_text(self, text: str) -> None:
        self.css_text += text

    def add_class(self, name: str) -> None:
        self.classes.add(name)

    def remove_class(self, name: str) -> None:
        self.classes.discard(name)

    def declarations(self) -> List[str]:
        return [f"{part.strip()};" for part in self.css_text.split(";") if part.strip()]


def apply_theme(surface: StyleSurface, theme: Theme, animated: bool = False) -> None:
    """
    Replace the surface's inline style with the theme's declarations.

    Args:
        surface: Target surface
        theme: Result of ``generate_css_color``
        animated: Append a background-color transition directive
    """
    surface.set_css_text("".join(theme.css_variable))
    if animated:
        surface.append_css_text(c.TRANSITION_DIRECTIVE)

    if theme.contrast.result == "black":
        surface.add_class(c.DARK_CLASS)
    else:
        surface.remove_class(c.DARK_CLASS)
    log.debug("applied theme %s (%s)", theme.colors.hex, theme.contrast.result)


def calculate_color(
    surface: StyleSurface,
    model: ModelLike,
    value: ColorValue,
    animated: bool = False,
) -> Dict[str, Any]:
    """
    Derive a theme, apply it to ``surface`` and return the caller-facing parts.

    The returned ``gradients`` keep the ramp order, darkest first; the
    ``--gradient-100`` .. ``--gradient-800`` declarations count the other way.
    """
    theme = generate_css_color(model, value)
    apply_theme(surface, theme, animated=animated)
    return {
        "colors": theme.colors,
        "contrast": theme.contrast,
        "gradients": list(theme.gradients),
        "variable": theme.variable,
    }
