"""
color package.
=============

Public API for color literals and color math.
Re-exports parse/adjust/css helpers so callers can import from
`...palette.color` without referencing submodules.
"""

from .adjust import darken, lighten, lightness, transparentize
from .css import css_string
from .parse import css3_color_names, parse_color, suggest_color_names

__all__ = [
    "parse_color",
    "suggest_color_names",
    "css3_color_names",
    "lighten",
    "darken",
    "transparentize",
    "lightness",
    "css_string",
]
