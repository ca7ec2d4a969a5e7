"""
logic
=====

Core palette transformations:
- expander: base palette → six variants per color
- emitter : expanded palette → utility-class StyleRules
- lookup  : non-raising read of an expanded palette
"""

from __future__ import annotations

from .emitter import class_selector, emit
from .expander import coerce_params, expand, expand_color, validate_params
from .lookup import lookup

__all__ = [
    "expand",
    "expand_color",
    "validate_params",
    "coerce_params",
    "emit",
    "class_selector",
    "lookup",
]

__docformat__ = "google"
