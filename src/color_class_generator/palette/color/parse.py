"""
parse.py
========

Does: Turn color literals (hex, CSS3 keywords, rgb()/rgba()) into RGBA records,
      with fuzzy "did you mean" hints for misspelt keywords.
Used By: Variant expander, palette config, any caller holding raw literals.
Returns: RGBA, or raises InvalidColorError.
"""

from __future__ import annotations

import logging
import math
import re
from functools import lru_cache
from numbers import Real

import webcolors
from rapidfuzz import fuzz, process

from color_class_generator.palette.errors import InvalidColorError
from color_class_generator.palette.types import RGBA, ColorInput

__all__ = ["parse_color", "suggest_color_names", "css3_color_names"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
SUGGESTION_CUTOFF = 80
SUGGESTION_LIMIT = 3

_FUNCTIONAL_RE = re.compile(
    r"^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*"
    r"(?:,\s*(\d*\.?\d+)\s*)?\)$"
)
_WORD_RE = re.compile(r"^[a-z][a-z\- ]*$")


# =============================================================================
# 1) KEYWORDS
# =============================================================================

@lru_cache(maxsize=1)
def css3_color_names() -> tuple[str, ...]:
    """Does: Return the CSS3 color keywords known to webcolors, sorted."""
    return tuple(sorted(webcolors.names("css3")))


def suggest_color_names(text: str, limit: int = SUGGESTION_LIMIT) -> tuple[str, ...]:
    """Does: Return up to `limit` CSS3 keywords close to `text` (best first)."""
    query = text.strip().lower().replace("-", "").replace(" ", "")
    if not query:
        return ()
    hits = process.extract(
        query,
        css3_color_names(),
        scorer=fuzz.ratio,
        limit=limit,
        score_cutoff=SUGGESTION_CUTOFF,
    )
    return tuple(name for name, _score, _idx in hits)


# =============================================================================
# 2) LITERALS
# =============================================================================

def _check_rgba(color: RGBA, source: object = None) -> RGBA:
    """Range-check channels and alpha; errors report `source` (the caller's literal) when given."""
    shown = color if source is None else source
    channels_ok = all(
        isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255
        for c in color.rgb
    )
    if not channels_ok:
        raise InvalidColorError(shown, reason="out of the 0-255 channel range")
    alpha = color.alpha
    if isinstance(alpha, bool) or not isinstance(alpha, Real):
        raise InvalidColorError(shown, reason="not a color (alpha must be a number)")
    if math.isnan(alpha) or not 0.0 <= alpha <= 1.0:
        raise InvalidColorError(shown, reason="out of the 0-1 alpha range")
    return color


def _parse_functional(text: str, source: str) -> RGBA | None:
    m = _FUNCTIONAL_RE.match(text)
    if not m:
        return None
    r, g, b = (int(v) for v in m.groups()[:3])
    alpha = float(m.group(4)) if m.group(4) is not None else 1.0
    return _check_rgba(RGBA(r, g, b, alpha), source=source)


def _parse_hex(text: str, source: str) -> RGBA:
    try:
        r, g, b = webcolors.hex_to_rgb(text)
    except ValueError as e:
        raise InvalidColorError(source, reason="not a valid hex color") from e
    return RGBA(r, g, b)


def _parse_keyword(text: str, source: str) -> RGBA:
    try:
        hx = webcolors.name_to_hex(text, spec="css3")
    except ValueError as e:
        hints = suggest_color_names(text) if _WORD_RE.match(text) else ()
        raise InvalidColorError(source, reason="not a color", suggestions=hints) from e
    r, g, b = webcolors.hex_to_rgb(hx)
    return RGBA(r, g, b)


def parse_color(value: ColorInput, *, opaque: bool = False) -> RGBA:
    """
    Does: Parse a color literal or validate an RGBA record.

    Args:
        value: RGBA, "#rgb"/"#rrggbb", a CSS3 keyword, or "rgb(...)"/"rgba(...)".
        opaque: Reject colors whose alpha is below 1.

    Returns:
        The RGBA color. RGBA inputs are returned as the same object.

    Raises:
        InvalidColorError: value is not a color, or is translucent while
            `opaque` is set. `key` is left unset; callers attach it.
    """
    if isinstance(value, RGBA):
        color = _check_rgba(value)
    elif isinstance(value, str):
        text = value.strip().lower()
        if text.startswith("#"):
            color = _parse_hex(text, value)
        else:
            color = _parse_functional(text, value) or _parse_keyword(text, value)
    else:
        raise InvalidColorError(value, reason=f"a {type(value).__name__}, not a color")

    if opaque and not color.is_opaque:
        raise InvalidColorError(value, reason="not fully opaque")
    logger.debug("Parsed %r → %s", value, color)
    return color
