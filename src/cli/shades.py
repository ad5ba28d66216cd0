#!/usr/bin/env python3
"""
Generate lightness-graded shades of a base color.

Usage:
  colortuner "#3366cc"
  colortuner 3366cc -n 6 --format rgb_255
  colortuner "#ff0000" -n 4 --json
  COLORTUNER_LOG_LEVEL=DEBUG colortuner "#00ff00"

Notes:
  - The shade count goes to the engine as-is (>= 2). Slider-style clamping
    lives in colortuner.ui_helpers, not here.
  - --format accepts an enum value ("rgb_255") or a UI label ("RGB (0-255)").
  - Defaults for --format/--json come from the `cli` section of
    configs/default.yaml in a source checkout, overridden by config.yaml in
    the current directory. An installed copy ships no configs/, so without a
    local config.yaml it uses the built-in defaults (hex, no JSON).
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from colortuner import ColorTunerError, ExportFormat, export_shades, generate_shades
from common import settings as _settings
from common.logging import setup_default_logging
from util.config import load_cli_defaults

logger = logging.getLogger(__name__)

_FORMAT_CHOICES = [fmt.value for fmt in ExportFormat]


def _parse_format(value: str) -> ExportFormat:
    try:
        return ExportFormat.from_value(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid format {value!r} (choose from {', '.join(_FORMAT_CHOICES)})"
        ) from None


def _format_entry(entry: object) -> str:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, tuple):
        return " ".join(f"{v:.4f}" if isinstance(v, float) else str(v) for v in entry)
    return str(entry)


def build_parser() -> argparse.ArgumentParser:
    defaults = load_cli_defaults()

    ap = argparse.ArgumentParser(
        prog="colortuner",
        description="Generate shades of a color from white to black.",
    )
    ap.add_argument("base", help="base color as #rrggbb or rrggbb")
    ap.add_argument(
        "-n",
        "--count",
        type=int,
        default=_settings.get().DEFAULT_SHADE_COUNT,
        help="number of shades (>= 2)",
    )
    ap.add_argument(
        "-f",
        "--format",
        type=_parse_format,
        default=defaults.format,
        help="output format: " + ", ".join(_FORMAT_CHOICES),
    )
    ap.add_argument(
        "--json",
        action="store_true",
        default=defaults.json,
        help="emit a JSON document instead of one shade per line",
    )
    ap.add_argument("--log-level", default=None, help="logging level (default from env)")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level or _settings.get().LOG_LEVEL)

    try:
        shades = generate_shades(args.base, args.count)
    except ColorTunerError as e:
        logger.debug("rejected input base=%r count=%r", args.base, args.count)
        print(f"colortuner: error: {e}", file=sys.stderr)
        return 2

    logger.debug("generated %d shades for %s", len(shades), args.base)
    entries = export_shades(shades, args.format)

    if args.json:
        doc = {
            "base": args.base,
            "count": args.count,
            "format": args.format.value,
            "shades": [list(e) if isinstance(e, tuple) else e for e in entries],
        }
        print(json.dumps(doc, indent=2))
    else:
        for entry in entries:
            print(_format_entry(entry))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
