# color_class_generator/palette/types.py
from __future__ import annotations

"""
types.py.

Does: Define the immutable records passed between expander, emitter and renderers.
Returns: RGBA, DerivationParams, StyleRule plus mapping aliases.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, NamedTuple, Union

__all__ = [
    "RGBA",
    "DerivationParams",
    "StyleRule",
    "StyleProperty",
    "ColorInput",
    "BaseColorMap",
    "VariantMap",
    "ExpandedColorMap",
]

__docformat__ = "google"


class RGBA(NamedTuple):
    """sRGB color with integer channels (0–255) and float alpha (0–1)."""

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    @property
    def is_opaque(self) -> bool:
        return self.alpha >= 1.0


@dataclass(frozen=True)
class DerivationParams:
    """
    Magnitudes for one expansion run.

    Attributes:
        shade_amount: Lightness percentage for `light` / `dark`.
        shader_amount: Lightness percentage for `lighter` / `darker`.
        trans_amount: Alpha fraction removed for `trans`.
    """

    shade_amount: float
    shader_amount: float
    trans_amount: float


StyleProperty = Literal["color", "background-color"]


@dataclass(frozen=True)
class StyleRule:
    selector: str
    property: StyleProperty
    value: str


ColorInput = Union[RGBA, str]
BaseColorMap = Mapping[str, ColorInput]
VariantMap = Mapping[str, RGBA]
ExpandedColorMap = Mapping[str, VariantMap]
