from __future__ import annotations

"""Helpers for handing shade sets to external consumers.

This module exposes label/enum pairs for export formats and converts a
shade set (list of hex strings) into simple color lists or a NumPy array
that UI and rendering code can consume directly.
"""

from enum import Enum
from typing import Dict, List, Sequence

import numpy as np

from .color_types import ShadeSet
from .engine import parse_hex_to_rgb, rgb_to_hex, rgb_to_hsl


class ExportFormat(Enum):
    """Supported output formats for exported shade lists."""

    HEX = "hex"
    RGB_255 = "rgb_255"
    RGB_01 = "rgb_01"
    HSL = "hsl"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        """Resolve an enum value ("rgb_255") or a UI label ("RGB (0-255)")."""
        for fmt in cls:
            if fmt.value == value:
                return fmt
        if value in EXPORT_FORMAT_LABEL_MAP:
            return EXPORT_FORMAT_LABEL_MAP[value]
        raise ValueError(f"Unknown export format: {value}")


# Label/Enum pairs for UI choices
EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("HEX", ExportFormat.HEX),
    ("RGB (0-255)", ExportFormat.RGB_255),
    ("RGB (0-1)", ExportFormat.RGB_01),
    ("HSL", ExportFormat.HSL),
]

EXPORT_FORMAT_LABEL_MAP: Dict[str, ExportFormat] = {
    label: value for label, value in EXPORT_FORMAT_OPTIONS
}


def export_shades(shades: Sequence[str], fmt: ExportFormat | str) -> List[object]:
    """Convert a shade set to a list of colors in the desired format."""
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    if export_fmt == ExportFormat.HEX:
        return [rgb_to_hex(parse_hex_to_rgb(h)) for h in shades]
    rgbs = [parse_hex_to_rgb(h) for h in shades]
    if export_fmt == ExportFormat.RGB_255:
        return [tuple(rgb) for rgb in rgbs]
    if export_fmt == ExportFormat.RGB_01:
        return [(rgb.r / 255.0, rgb.g / 255.0, rgb.b / 255.0) for rgb in rgbs]
    if export_fmt == ExportFormat.HSL:
        return [tuple(rgb_to_hsl(rgb)) for rgb in rgbs]
    raise ValueError(f"Unsupported export format: {fmt}")


def shades_to_array(shades: ShadeSet) -> np.ndarray:
    """Return shades as a float32 array of shape (n, 3) with RGB in [0, 1]."""
    if not shades:
        return np.zeros((0, 3), dtype=np.float32)
    rgb = np.array([tuple(parse_hex_to_rgb(h)) for h in shades], dtype=np.float32)
    return rgb / np.float32(255.0)


__all__ = [
    "ExportFormat",
    "EXPORT_FORMAT_OPTIONS",
    "EXPORT_FORMAT_LABEL_MAP",
    "export_shades",
    "shades_to_array",
]
