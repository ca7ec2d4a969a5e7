"""
emitter.py.

Does: Emit `.color-<name>-<variant>` / `.bg-<name>-<variant>` rules from an
      expanded palette, two per (color, variant), in stored order.
Returns: Tuple of StyleRule; no sorting, merging or deduplication.
"""

from __future__ import annotations

import logging

from color_class_generator.general.utils import debug
from color_class_generator.palette.color import css_string
from color_class_generator.palette.constants import (
    BACKGROUND_CLASS_PREFIX,
    BACKGROUND_PROPERTY,
    COLOR_CLASS_PREFIX,
    COLOR_PROPERTY,
)
from color_class_generator.palette.types import ExpandedColorMap, StyleRule

__all__ = ["emit", "class_selector"]

logger = logging.getLogger(__name__)


def _escape_ident(text: str) -> str:
    """Backslash-escape ASCII characters that are not legal inside a CSS identifier."""
    return "".join(
        "\\" + ch if ch.isascii() and not (ch.isalnum() or ch in "-_") else ch
        for ch in text
    )


def class_selector(prefix: str, color_name: str, variant_name: str) -> str:
    return "." + _escape_ident(f"{prefix}-{color_name}-{variant_name}")


def emit(expanded: ExpandedColorMap) -> tuple[StyleRule, ...]:
    """
    Does: Walk colors in stored order, variants in their fixed order, and emit
          the foreground rule then the background rule for each pair.
    Returns: 12 rules per color for a full six-variant map.
    """
    rules: list[StyleRule] = []
    for color_name, variants in expanded.items():
        for variant_name, color in variants.items():
            value = css_string(color)
            rules.append(
                StyleRule(
                    selector=class_selector(COLOR_CLASS_PREFIX, color_name, variant_name),
                    property=COLOR_PROPERTY,
                    value=value,
                )
            )
            rules.append(
                StyleRule(
                    selector=class_selector(BACKGROUND_CLASS_PREFIX, color_name, variant_name),
                    property=BACKGROUND_PROPERTY,
                    value=value,
                )
            )
        debug(f"{color_name}: {2 * len(variants)} rules", topic="emit")

    logger.debug("Emitted %d rules for %d colors", len(rules), len(expanded))
    return tuple(rules)
