# src/color_class_generator/palette/config.py
"""
config.py
=========

Does: Load a base palette and its derivation parameters from <data>/<file>.json,
      and run the whole load → expand → emit pipeline in one call.
Used By: Build scripts and tests that keep palettes in JSON.
Returns: (BaseColorMap, DerivationParams) or the emitted StyleRule tuple.

Expected document:
    {
      "colors": {"primary": "#6ab446", "neutral": "#333"},
      "params": {"shade_amount": 10, "shader_amount": 20, "trans_amount": 0.5}
    }
`params` and each of its keys are optional; defaults come from constants.
"""

from __future__ import annotations

import logging
import re
from dataclasses import asdict
from pathlib import Path
from typing import Any

from color_class_generator.general.utils import (
    ConfigParseError,
    ConfigTypeError,
    debug,
    load_config,
)
from color_class_generator.palette.constants import COLOR_NAME_PATTERN, DEFAULT_PARAMS
from color_class_generator.palette.logic import emit, expand
from color_class_generator.palette.types import DerivationParams, StyleRule

__all__ = ["load_palette", "build_palette_rules", "DEFAULT_PALETTE_FILE"]

log = logging.getLogger(__name__)

DEFAULT_PALETTE_FILE = "palette"
_PARAM_KEYS = frozenset(asdict(DEFAULT_PARAMS))
_COLOR_NAME_RE = re.compile(COLOR_NAME_PATTERN)


def _validate_palette_doc(doc: dict[str, Any]) -> dict[str, Any]:
    """Check document shape only; colors and ranges are checked by expand()."""
    unknown = sorted(set(doc) - {"colors", "params"})
    if unknown:
        raise ConfigParseError(f"unknown top-level keys: {', '.join(unknown)}")

    colors = doc.get("colors")
    if not isinstance(colors, dict):
        raise ConfigTypeError(
            f"'colors' must be an object of name → color, got {type(colors).__name__}"
        )
    bad_names = [k for k in colors if not _COLOR_NAME_RE.fullmatch(k)]
    if bad_names:
        raise ConfigParseError(
            f"color names may only use letters, digits, '-' and '_': {bad_names!r}"
        )

    params = doc.get("params", {})
    if not isinstance(params, dict):
        raise ConfigTypeError(f"'params' must be an object, got {type(params).__name__}")
    unknown_params = sorted(set(params) - _PARAM_KEYS)
    if unknown_params:
        raise ConfigParseError(f"unknown params: {', '.join(unknown_params)}")
    return {"colors": colors, "params": params}


def load_palette(
    file: str = DEFAULT_PALETTE_FILE,
    *,
    base_dir: Path | None = None,
) -> tuple[dict[str, str], DerivationParams]:
    """Does: Read the palette document and merge its params over the defaults."""
    doc = load_config(file, "validated_dict", base_dir=base_dir, validator=_validate_palette_doc)
    params = DerivationParams(**{**asdict(DEFAULT_PARAMS), **doc["params"]})
    debug(f"{file}: {len(doc['colors'])} colors, params={params}", topic="config")
    log.debug("Loaded palette %s with %d colors", file, len(doc["colors"]))
    return dict(doc["colors"]), params


def build_palette_rules(
    file: str = DEFAULT_PALETTE_FILE,
    *,
    base_dir: Path | None = None,
) -> tuple[StyleRule, ...]:
    """Does: load_palette → expand → emit."""
    colors, params = load_palette(file, base_dir=base_dir)
    return emit(expand(colors, params))
