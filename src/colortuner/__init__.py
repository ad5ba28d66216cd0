"""Public entrypoint for the colortuner shade library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``colortuner`` instead of individual
submodules.
"""

from .color_types import HSL, RGB, ShadeSet
from .engine import (
    ColorEngine,
    DefaultColorEngine,
    default_engine,
    generate_shades,
    hex_to_hsl,
    hsl_to_rgb,
    hsl_to_rgb_hex,
    normalize_hue,
    parse_hex_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
)
from .errors import ColorTunerError, InvalidColorFormat, InvalidHSLValue, InvalidShadeCount
from .export import (
    EXPORT_FORMAT_LABEL_MAP,
    EXPORT_FORMAT_OPTIONS,
    ExportFormat,
    export_shades,
    shades_to_array,
)
from .ui_helpers import build_shades_from_values, clamp_shade_count

__all__ = [
    "RGB",
    "HSL",
    "ShadeSet",
    "ColorEngine",
    "DefaultColorEngine",
    "default_engine",
    "parse_hex_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hsl_to_rgb_hex",
    "hex_to_hsl",
    "rgb_to_hex",
    "normalize_hue",
    "generate_shades",
    "ColorTunerError",
    "InvalidColorFormat",
    "InvalidHSLValue",
    "InvalidShadeCount",
    "ExportFormat",
    "EXPORT_FORMAT_OPTIONS",
    "EXPORT_FORMAT_LABEL_MAP",
    "export_shades",
    "shades_to_array",
    "build_shades_from_values",
    "clamp_shade_count",
]
