"""
expander.py.
===========

Does: Expand a base palette into the six fixed variants per color
      (base, light, lighter, dark, darker, trans).
Returns: Read-only ExpandedColorMap keyed like the input, in input order.
Used By: emit(), stylesheet rendering, build_palette_rules().
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from numbers import Real
from types import MappingProxyType
from typing import Any

from color_class_generator.general.utils import debug
from color_class_generator.palette.color import darken, lighten, parse_color, transparentize
from color_class_generator.palette.constants import (
    DEFAULT_PARAMS,
    FRACTION_RANGE,
    PERCENT_RANGE,
    VARIANT_ORDER,
)
from color_class_generator.palette.errors import InvalidColorError, InvalidParameterError
from color_class_generator.palette.types import (
    RGBA,
    BaseColorMap,
    DerivationParams,
    ExpandedColorMap,
    VariantMap,
)

__all__ = ["expand", "expand_color", "validate_params", "coerce_params"]

logger = logging.getLogger(__name__)

_PARAM_RANGES: dict[str, tuple[tuple[float, float], str]] = {
    "shade_amount": (PERCENT_RANGE, "a percentage in [0, 100]"),
    "shader_amount": (PERCENT_RANGE, "a percentage in [0, 100]"),
    "trans_amount": (FRACTION_RANGE, "a fraction in [0, 1]"),
}


# ── Parameters ───────────────────────────────────────────────────────────────
def _check_amount(name: str, value: Any) -> float:
    (lo, hi), expected = _PARAM_RANGES[name]
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterError(name, value, expected)
    v = float(value)
    if math.isnan(v) or not lo <= v <= hi:
        raise InvalidParameterError(name, value, expected)
    return v


def coerce_params(params: DerivationParams | Mapping[str, Any]) -> DerivationParams:
    """
    Does: Accept DerivationParams or a plain mapping with the same field names.
    Returns: DerivationParams (range checks are left to validate_params).
    """
    if isinstance(params, DerivationParams):
        return params
    if not isinstance(params, Mapping):
        raise InvalidParameterError("params", params, "DerivationParams or a mapping")
    unknown = sorted(set(params) - set(_PARAM_RANGES))
    if unknown:
        raise InvalidParameterError(unknown[0], params[unknown[0]], "no such parameter")
    missing = [name for name in _PARAM_RANGES if name not in params]
    if missing:
        raise InvalidParameterError(missing[0], None, "a value (parameter is required)")
    return DerivationParams(**{name: params[name] for name in _PARAM_RANGES})


def validate_params(params: DerivationParams | Mapping[str, Any]) -> DerivationParams:
    """Does: Range-check every derivation parameter; raise InvalidParameterError on the first bad one."""
    p = coerce_params(params)
    checked = DerivationParams(
        shade_amount=_check_amount("shade_amount", p.shade_amount),
        shader_amount=_check_amount("shader_amount", p.shader_amount),
        trans_amount=_check_amount("trans_amount", p.trans_amount),
    )
    if checked.shader_amount < checked.shade_amount:
        logger.warning(
            "shader_amount (%s) is below shade_amount (%s); "
            "lighter/darker will sit closer to base than light/dark",
            checked.shader_amount,
            checked.shade_amount,
        )
    return checked


# ── Expansion ────────────────────────────────────────────────────────────────
def expand_color(color: RGBA, params: DerivationParams) -> VariantMap:
    """Does: Derive the six variants of one opaque color, in VARIANT_ORDER."""
    derived = {
        "base": color,
        "light": lighten(color, params.shade_amount),
        "lighter": lighten(color, params.shader_amount),
        "dark": darken(color, params.shade_amount),
        "darker": darken(color, params.shader_amount),
        "trans": transparentize(color, params.trans_amount),
    }
    return MappingProxyType({name: derived[name] for name in VARIANT_ORDER})


def expand(
    base: BaseColorMap,
    params: DerivationParams | Mapping[str, Any] = DEFAULT_PARAMS,
) -> ExpandedColorMap:
    """
    Does: Expand every base color into its variant map.

    Args:
        base: Ordered mapping of color name → RGBA or color literal.
        params: Derivation magnitudes; checked before any color is parsed.

    Returns:
        Read-only mapping with the same keys, in the same order, each mapped
        to a read-only VariantMap. `base` holds RGBA values: an RGBA input is
        kept as the same object, a string literal is stored parsed, so compare
        `css_string(out[k]["base"])` against the normalized literal, not the raw
        string.

    Raises:
        InvalidParameterError: a parameter is missing, non-numeric or out of range.
        InvalidColorError: a base value is not a valid opaque color; `key`
            names the entry. Nothing is returned for the other entries.
    """
    checked = validate_params(params)
    if not isinstance(base, Mapping):
        raise TypeError(f"base palette must be a mapping, got {type(base).__name__}")

    expanded: dict[str, VariantMap] = {}
    for key, raw in base.items():
        try:
            color = parse_color(raw, opaque=True)
        except InvalidColorError as e:
            raise e.with_key(key) from e
        expanded[key] = expand_color(color, checked)
        debug(f"{key}: {raw!r} → {len(VARIANT_ORDER)} variants", topic="expand")

    logger.debug(
        "Expanded %d base colors (shade=%s, shader=%s, trans=%s)",
        len(expanded),
        checked.shade_amount,
        checked.shader_amount,
        checked.trans_amount,
    )
    return MappingProxyType(expanded)
