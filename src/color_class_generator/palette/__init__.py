"""
palette.
=======

Does: Public API for color palette expansion and utility-class generation.
Returns: expand/emit/lookup, color helpers, config loading, stylesheet rendering,
         the data records, and the error types.
Used by: Build scripts generating `.color-*` / `.bg-*` utility classes.
"""

from __future__ import annotations

# ── Records & constants ──────────────────────────────────────────────────────
from .constants import DEFAULT_PARAMS, VARIANT_ORDER
from .errors import InvalidColorError, InvalidParameterError, PaletteError
from .types import (
    RGBA,
    BaseColorMap,
    DerivationParams,
    ExpandedColorMap,
    StyleRule,
    VariantMap,
)

# ── Color helpers ────────────────────────────────────────────────────────────
from .color import css_string, darken, lighten, parse_color, transparentize

# ── Core ─────────────────────────────────────────────────────────────────────
from .logic import emit, expand, lookup

# ── Adapters ─────────────────────────────────────────────────────────────────
from .config import build_palette_rules, load_palette
from .stylesheet import render_custom_properties, render_stylesheet

__all__ = [
    # records & constants
    "RGBA",
    "BaseColorMap",
    "DerivationParams",
    "ExpandedColorMap",
    "StyleRule",
    "VariantMap",
    "DEFAULT_PARAMS",
    "VARIANT_ORDER",
    # errors
    "PaletteError",
    "InvalidColorError",
    "InvalidParameterError",
    # color helpers
    "parse_color",
    "lighten",
    "darken",
    "transparentize",
    "css_string",
    # core
    "expand",
    "emit",
    "lookup",
    # adapters
    "load_palette",
    "build_palette_rules",
    "render_stylesheet",
    "render_custom_properties",
]

__docformat__ = "google"
