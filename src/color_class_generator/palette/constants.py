# constants.py
# ============

"""
constants.
=========

Does: Define the fixed variant order, class-name prefixes, and derivation defaults.
Used By: Expander, emitter, stylesheet rendering, palette config loader.
Returns: Pure data only (no side effects).
"""

from __future__ import annotations

from .types import DerivationParams

# ── 1) Variants ──────────────────────────────────────────────────────────────
# Fixed order; every VariantMap carries exactly these keys, in this order.
VARIANT_ORDER: tuple[str, ...] = ("base", "light", "lighter", "dark", "darker", "trans")


# ── 2) Class names ───────────────────────────────────────────────────────────
COLOR_CLASS_PREFIX = "color"
BACKGROUND_CLASS_PREFIX = "bg"

COLOR_PROPERTY = "color"
BACKGROUND_PROPERTY = "background-color"


# ── 3) Derivation defaults ───────────────────────────────────────────────────
DEFAULT_SHADE_AMOUNT = 10.0  # percent of HLS lightness
DEFAULT_SHADER_AMOUNT = 20.0
DEFAULT_TRANS_AMOUNT = 0.5  # alpha fraction

PERCENT_RANGE = (0.0, 100.0)
FRACTION_RANGE = (0.0, 1.0)

DEFAULT_PARAMS = DerivationParams(
    shade_amount=DEFAULT_SHADE_AMOUNT,
    shader_amount=DEFAULT_SHADER_AMOUNT,
    trans_amount=DEFAULT_TRANS_AMOUNT,
)

# Digits kept on alpha when rendering rgba()
ALPHA_PRECISION = 3

# Color names usable unescaped inside a class name
COLOR_NAME_PATTERN = r"^[A-Za-z0-9_-]+$"
