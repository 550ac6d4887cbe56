"""
Gradient stop generation.

>>> from chromatheme.gradients import gradstop
>>> gradstop(3, "hex", ["#000000", "#FFFFFF"])
['#000000', '#808080', '#FFFFFF']
"""
from .gradstop import gradstop, bezier_weights
from .color_utils import parse_color, format_color, rgb_string

__all__ = ["gradstop", "bezier_weights", "parse_color", "format_color", "rgb_string"]
