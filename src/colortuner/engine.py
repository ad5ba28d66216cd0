from __future__ import annotations

"""Color conversion engine for hex, RGB and HSL.

This module defines the :class:`ColorEngine` protocol and a default,
stateless implementation. Module-level functions delegate to a shared
:class:`DefaultColorEngine` instance; since the engine holds no state they
are safe to call from any thread without synchronization.

Output hex strings are always lowercase ``#rrggbb``. Channel values are
rounded half up (``floor(x + 0.5)``), not with Python's banker's rounding,
so ``x.5`` always moves to the next integer.
"""

import math
import re
from numbers import Integral
from typing import Protocol, Sequence

from .color_types import HSL, RGB, ShadeSet
from .errors import InvalidColorFormat, InvalidHSLValue, InvalidShadeCount

MIN_SHADE_COUNT = 2

_HEX_RE = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


class ColorEngine(Protocol):
    """Protocol abstracting hex/RGB/HSL conversions."""

    def parse_hex_to_rgb(self, hex_str: str) -> RGB: ...

    def rgb_to_hsl(self, rgb: Sequence[int]) -> HSL: ...

    def hsl_to_rgb_hex(self, h: float, s: float, l: float) -> str: ...  # noqa: E741

    def normalize_hue(self, h: float) -> float: ...


class DefaultColorEngine:
    """Default HSL implementation (CSS Color Level 3 formulas)."""

    def normalize_hue(self, h: float) -> float:
        """Normalize hue angle into [0, 360)."""
        return (h % 360.0 + 360.0) % 360.0

    def parse_hex_to_rgb(self, hex_str: str) -> RGB:
        """Parse ``#rrggbb`` or ``rrggbb`` (any case) into an :class:`RGB`.

        Raises
        ------
        InvalidColorFormat
            If the input is not a string of exactly six hex digits after an
            optional leading ``#``. Shorthand, names and whitespace are
            rejected as-is.
        """
        if not isinstance(hex_str, str):
            raise InvalidColorFormat(hex_str)
        m = _HEX_RE.fullmatch(hex_str)
        if m is None:
            raise InvalidColorFormat(hex_str)
        r, g, b = (int(part, 16) for part in m.groups())
        return RGB(r, g, b)

    def rgb_to_hsl(self, rgb: Sequence[int]) -> HSL:
        """Convert 8-bit RGB to HSL (h in degrees, s/l in percent)."""
        r_i, g_i, b_i = (_clamp(int(c), 0, 255) for c in rgb)
        r = r_i / 255.0
        g = g_i / 255.0
        b = b_i / 255.0

        mx = max(r, g, b)
        mn = min(r, g, b)
        l = (mx + mn) / 2.0  # noqa: E741

        if mx == mn:
            return HSL(0.0, 0.0, l * 100.0)

        d = mx - mn
        s = d / (2.0 - mx - mn) if l > 0.5 else d / (mx + mn)
        if mx == r:
            h = (g - b) / d + (6.0 if g < b else 0.0)
        elif mx == g:
            h = (b - r) / d + 2.0
        else:
            h = (r - g) / d + 4.0
        h /= 6.0

        return HSL(
            self.normalize_hue(h * 360.0),
            _clamp(s * 100.0, 0.0, 100.0),
            _clamp(l * 100.0, 0.0, 100.0),
        )

    def hsl_to_rgb(self, h: float, s: float, l: float) -> RGB:  # noqa: E741
        """Convert HSL to 8-bit RGB using the chroma/k-offset formula.

        Any finite h/s/l is accepted: h is wrapped into [0, 360) and s/l are
        clamped into [0, 100].

        Raises
        ------
        InvalidHSLValue
            If a component is NaN or infinite.
        """
        for name, v in (("h", h), ("s", s), ("l", l)):
            if not math.isfinite(v):
                raise InvalidHSLValue(name, v)
        h = self.normalize_hue(h)
        s_f = _clamp(s, 0.0, 100.0) / 100.0
        l_f = _clamp(l, 0.0, 100.0) / 100.0
        a = s_f * min(l_f, 1.0 - l_f)

        def channel(n: int) -> int:
            k = (n + h / 30.0) % 12.0
            c = l_f - a * max(min(k - 3.0, 9.0 - k, 1.0), -1.0)
            return _round_half_up(255.0 * c)

        return RGB(channel(0), channel(8), channel(4))

    def hsl_to_rgb_hex(self, h: float, s: float, l: float) -> str:  # noqa: E741
        """Convert HSL to a lowercase ``#rrggbb`` string."""
        return rgb_to_hex(self.hsl_to_rgb(h, s, l))


def rgb_to_hex(rgb: Sequence[int]) -> str:
    """Format an RGB triple as lowercase ``#rrggbb``."""
    r, g, b = (_clamp(int(c), 0, 255) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _clamp(x, lo, hi):
    return lo if x < lo else hi if x > hi else x


_DEFAULT_ENGINE = DefaultColorEngine()


def default_engine() -> DefaultColorEngine:
    """Return the shared stateless engine instance."""
    return _DEFAULT_ENGINE


def normalize_hue(h: float) -> float:
    return _DEFAULT_ENGINE.normalize_hue(h)


def parse_hex_to_rgb(hex_str: str) -> RGB:
    return _DEFAULT_ENGINE.parse_hex_to_rgb(hex_str)


def rgb_to_hsl(rgb: Sequence[int]) -> HSL:
    return _DEFAULT_ENGINE.rgb_to_hsl(rgb)


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:  # noqa: E741
    return _DEFAULT_ENGINE.hsl_to_rgb(h, s, l)


def hsl_to_rgb_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    return _DEFAULT_ENGINE.hsl_to_rgb_hex(h, s, l)


def hex_to_hsl(hex_str: str) -> HSL:
    """Parse a hex color and convert it to HSL in one step."""
    return _DEFAULT_ENGINE.rgb_to_hsl(_DEFAULT_ENGINE.parse_hex_to_rgb(hex_str))


def generate_shades(
    base_color_hex: str,
    count: int,
    engine: ColorEngine | None = None,
) -> ShadeSet:
    """Generate ``count`` shades of a base color, lightest first.

    Hue and saturation of the base color are held fixed; lightness runs
    linearly from 100 down to 0 inclusive, so the first entry is always
    ``#ffffff`` and the last is always ``#000000``.

    Parameters
    ----------
    base_color_hex:
        Base color as ``#rrggbb`` or ``rrggbb``.
    count:
        Number of shades, an integer >= 2.
    engine:
        Optional ColorEngine. If None, the shared default engine is used.

    Raises
    ------
    InvalidColorFormat
        If ``base_color_hex`` is not a strict 6-digit hex color.
    InvalidShadeCount
        If ``count`` is not an integer or is below 2.
    """
    if isinstance(count, bool) or not isinstance(count, Integral):
        raise InvalidShadeCount(count, MIN_SHADE_COUNT)
    n = int(count)
    if n < MIN_SHADE_COUNT:
        raise InvalidShadeCount(count, MIN_SHADE_COUNT)

    if engine is None:
        engine = default_engine()

    h, s, _ = engine.rgb_to_hsl(engine.parse_hex_to_rgb(base_color_hex))
    shades: ShadeSet = []
    for i in range(n):
        lightness = 100.0 - (i / (n - 1)) * 100.0
        shades.append(engine.hsl_to_rgb_hex(h, s, lightness))
    return shades


__all__ = [
    "MIN_SHADE_COUNT",
    "ColorEngine",
    "DefaultColorEngine",
    "default_engine",
    "normalize_hue",
    "parse_hex_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hsl_to_rgb_hex",
    "hex_to_hsl",
    "rgb_to_hex",
    "generate_shades",
]
