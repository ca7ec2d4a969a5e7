"""
adjust.py
=========

Does: Lighten, darken and transparentize RGBA colors. Lightness moves along the
      HLS lightness axis (colorsys) and is clamped, never wrapped.
Returns: New RGBA values; inputs are never modified.
"""

from __future__ import annotations

import colorsys

from color_class_generator.palette.types import RGBA

__all__ = ["lighten", "darken", "transparentize", "lightness"]


def _clamp(v: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, v))


def _to_hls(color: RGBA) -> tuple[float, float, float]:
    r, g, b = (c / 255.0 for c in color.rgb)
    return colorsys.rgb_to_hls(r, g, b)


def _from_hls(h: float, l: float, s: float, alpha: float) -> RGBA:
    r, g, b = (int(round(v * 255)) for v in colorsys.hls_to_rgb(h, l, s))
    return RGBA(r, g, b, alpha)


def lightness(color: RGBA) -> float:
    """Does: Return HLS lightness in [0, 1]."""
    return _to_hls(color)[1]


def _shift_lightness(color: RGBA, delta: float) -> RGBA:
    h, l, s = _to_hls(color)
    shifted = _clamp(l + delta)
    if shifted == l:
        return color
    return _from_hls(h, shifted, s, color.alpha)


def lighten(color: RGBA, amount: float) -> RGBA:
    """Does: Raise lightness by `amount` percentage points (0–100)."""
    return _shift_lightness(color, amount / 100.0)


def darken(color: RGBA, amount: float) -> RGBA:
    """Does: Lower lightness by `amount` percentage points (0–100)."""
    return _shift_lightness(color, -amount / 100.0)


def transparentize(color: RGBA, amount: float) -> RGBA:
    """Does: Reduce alpha by `amount` (fraction); RGB channels are kept."""
    return color._replace(alpha=_clamp(color.alpha - amount))
