"""
css.py

Does: Render RGBA values as CSS color strings: `#rrggbb` when opaque,
      `rgba(r, g, b, a)` otherwise.
"""

from __future__ import annotations

import webcolors

from color_class_generator.palette.constants import ALPHA_PRECISION
from color_class_generator.palette.types import RGBA

__all__ = ["css_string"]


def css_string(color: RGBA) -> str:
    # hex whenever alpha rounds to 1
    alpha = round(color.alpha, ALPHA_PRECISION)
    if alpha >= 1.0:
        return webcolors.rgb_to_hex(color.rgb)
    r, g, b = color.rgb
    return f"rgba({r}, {g}, {b}, {format(alpha, 'g')})"
