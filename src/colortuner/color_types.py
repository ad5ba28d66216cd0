from __future__ import annotations

"""Core color value types used by colortuner.

Both types are plain immutable tuples so they compare by value and unpack
like the ``(r, g, b)`` / ``(h, s, l)`` triples callers already pass around.
"""

from typing import List, NamedTuple


class RGB(NamedTuple):
    """8-bit sRGB color.

    Attributes
    ----------
    r, g, b:
        Channel intensities in [0, 255].
    """

    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue/saturation/lightness color.

    Attributes
    ----------
    h:
        Hue in degrees, normalized into [0, 360).
    s:
        Saturation in percent, [0, 100].
    l:
        Lightness in percent, [0, 100].
    """

    h: float
    s: float
    l: float  # noqa: E741


# Ordered lightest -> darkest, lowercase "#rrggbb" entries.
ShadeSet = List[str]


__all__ = ["RGB", "HSL", "ShadeSet"]
