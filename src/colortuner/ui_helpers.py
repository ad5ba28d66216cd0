from __future__ import annotations

"""Helpers for driving the shade engine from UI-style values.

A color picker and a count slider hand over loosely typed values (strings
from text fields, floats from sliders, ``None`` before first interaction).
This module normalizes those values the way the UI would and then calls
:func:`colortuner.engine.generate_shades`. The base color is never
auto-corrected: bad color text still raises ``InvalidColorFormat``.
"""

import logging
from typing import Any

from common import settings as _settings

from .color_types import ShadeSet
from .engine import generate_shades

logger = logging.getLogger(__name__)


def clamp_shade_count(value: Any | None) -> int:
    """Normalize a slider value into the configured shade-count range.

    - ``None`` or non-numeric values fall back to the configured default.
    - Floats are rounded to the nearest step.
    - The result is clamped into ``[SHADE_COUNT_MIN, SHADE_COUNT_MAX]``.
    """
    cfg = _settings.get()
    if value is None or isinstance(value, bool):
        return cfg.DEFAULT_SHADE_COUNT
    try:
        n = int(round(float(value)))
    except (TypeError, ValueError, OverflowError):
        logger.debug("shade count %r is not numeric; using default", value)
        return cfg.DEFAULT_SHADE_COUNT
    if n < cfg.SHADE_COUNT_MIN:
        return cfg.SHADE_COUNT_MIN
    if n > cfg.SHADE_COUNT_MAX:
        return cfg.SHADE_COUNT_MAX
    return n


def build_shades_from_values(
    *,
    base_color_value: Any | None,
    shade_count_value: Any | None,
) -> ShadeSet:
    """Build a shade set from raw picker/slider values.

    ``base_color_value`` of ``None`` (no selection yet) falls back to the
    configured default base color; any other value goes to the engine
    unchanged.
    """
    base = base_color_value
    if base is None:
        base = _settings.get().DEFAULT_BASE_COLOR
    count = clamp_shade_count(shade_count_value)
    logger.debug("building %d shades from %r", count, base)
    return generate_shades(base, count)


__all__ = ["clamp_shade_count", "build_shades_from_values"]
