from __future__ import annotations

"""Error types raised by the colortuner engine.

All errors derive from :class:`ValueError` so callers that already guard
color input with ``except ValueError`` keep working.
"""

from typing import Any


class ColorTunerError(ValueError):
    """Base class for colortuner validation failures."""


class InvalidColorFormat(ColorTunerError):
    """Raised when a color string is not exactly ``#rrggbb`` / ``rrggbb``."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"invalid hex color: {value!r} (expected 6 hex digits with optional '#')"
        )


class InvalidHSLValue(ColorTunerError):
    """Raised when an HSL component is NaN or infinite."""

    def __init__(self, name: str, value: Any) -> None:
        self.name = name
        self.value = value
        super().__init__(f"HSL component {name} must be a finite number, got {value!r}")


class InvalidShadeCount(ColorTunerError):
    """Raised when a shade count is not an integer >= 2."""

    def __init__(self, count: Any, minimum: int = 2) -> None:
        self.count = count
        self.minimum = minimum
        super().__init__(f"shade count must be an integer >= {minimum}, got {count!r}")


__all__ = ["ColorTunerError", "InvalidColorFormat", "InvalidHSLValue", "InvalidShadeCount"]
