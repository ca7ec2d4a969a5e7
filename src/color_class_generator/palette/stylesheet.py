"""
stylesheet.py

Does: Render emitted StyleRules as stylesheet text and an expanded palette as a
      `:root` block of custom properties.
Returns: CSS strings; nothing is written to disk.
"""

from __future__ import annotations

from collections.abc import Iterable

from color_class_generator.palette.color import css_string
from color_class_generator.palette.constants import COLOR_CLASS_PREFIX
from color_class_generator.palette.types import ExpandedColorMap, StyleRule

__all__ = ["render_rule", "render_stylesheet", "render_custom_properties"]


def render_rule(rule: StyleRule) -> str:
    return f"{rule.selector} {{\n  {rule.property}: {rule.value};\n}}"


def render_stylesheet(rules: Iterable[StyleRule]) -> str:
    """
    Render rules one block each, in the given order.

    Args:
        rules: StyleRules, typically from emit().

    Returns:
        Blocks separated by a blank line, with a trailing newline; "" for no rules.
    """
    blocks = [render_rule(rule) for rule in rules]
    return "\n\n".join(blocks) + "\n" if blocks else ""


def render_custom_properties(
    expanded: ExpandedColorMap,
    prefix: str = COLOR_CLASS_PREFIX,
) -> str:
    """
    Render `--<prefix>-<name>-<variant>` custom properties inside `:root`.

    Args:
        expanded: Output of expand().
        prefix: Leading segment of every property name.

    Returns:
        CSS string with a single :root block, in expansion order.
    """
    lines = [":root {"]
    for color_name, variants in expanded.items():
        for variant_name, color in variants.items():
            lines.append(f"  --{prefix}-{color_name}-{variant_name}: {css_string(color)};")
    lines.append("}")
    return "\n".join(lines) + "\n"
