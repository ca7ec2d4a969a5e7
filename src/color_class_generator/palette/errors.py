"""
errors.py.

Does: Exceptions raised by color parsing and palette expansion.
Used by: palette.color.parse, palette.logic.expander, callers catching PaletteError.
"""

from __future__ import annotations

from typing import Any

__all__ = ["PaletteError", "InvalidColorError", "InvalidParameterError"]


class PaletteError(ValueError):
    """Base class for palette input errors."""


class InvalidColorError(PaletteError):
    """Raise when a base color cannot be read as a valid opaque color."""

    def __init__(
        self,
        value: Any,
        *,
        key: str | None = None,
        reason: str = "not a color",
        suggestions: tuple[str, ...] = (),
    ) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        self.suggestions = suggestions
        where = f"color {key!r}: " if key is not None else ""
        msg = f"{where}{value!r} is {reason}"
        if suggestions:
            msg += f" (did you mean {', '.join(suggestions)}?)"
        super().__init__(msg)

    def with_key(self, key: str) -> InvalidColorError:
        """Does: Return a copy of this error attributed to palette entry `key`."""
        return InvalidColorError(
            self.value, key=key, reason=self.reason, suggestions=self.suggestions
        )


class InvalidParameterError(PaletteError):
    """Raise when a derivation parameter is missing or out of range."""

    def __init__(self, name: str, value: Any, expected: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name}={value!r} is invalid; expected {expected}")
