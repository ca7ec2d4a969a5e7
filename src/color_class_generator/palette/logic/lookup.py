"""
lookup.py

Does: Read an expanded palette by color name and optional variant name.
Returns: The VariantMap, the variant's RGBA, or None when a key is unknown.
"""

from __future__ import annotations

from typing import overload

from color_class_generator.palette.types import RGBA, ExpandedColorMap, VariantMap

__all__ = ["lookup"]


@overload
def lookup(expanded: ExpandedColorMap, color_name: str) -> VariantMap | None: ...
@overload
def lookup(expanded: ExpandedColorMap, color_name: str, variant_name: None) -> VariantMap | None: ...
@overload
def lookup(expanded: ExpandedColorMap, color_name: str, variant_name: str) -> RGBA | None: ...


def lookup(
    expanded: ExpandedColorMap,
    color_name: str,
    variant_name: str | None = None,
) -> VariantMap | RGBA | None:
    """Missing color or variant is an ordinary outcome: returns None, never raises."""
    variants = expanded.get(color_name)
    if variants is None or variant_name is None:
        return variants
    return variants.get(variant_name)
