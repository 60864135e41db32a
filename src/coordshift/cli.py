"""
coordshift CLI entrypoint.

This CLI is intended for quick one-off conversions and debugging.
It delegates all conversion logic to `coordshift.converter.convert_point`.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any

from pydantic import ValidationError

from coordshift.config.settings import get_settings
from coordshift.converter import convert_point
from coordshift.core.logging import configure_logging
from coordshift.core.systems import GeodeticSystem
from coordshift.domain.models import ConversionRequest, GeoPoint
from coordshift.errors import CoordShiftError

_SYSTEM_DESCRIPTIONS = {
    GeodeticSystem.WGS84: "GPS / international standard, unobfuscated",
    GeodeticSystem.GCJ02: "regional obfuscated system (mainland China maps)",
    GeodeticSystem.BD09: "vendor system built on top of GCJ-02",
}


def _cmd_convert(args: argparse.Namespace) -> int:
    """Handle the `convert` subcommand."""
    settings = get_settings()
    try:
        request = ConversionRequest(
            source=args.source,
            target=args.target,
            point=GeoPoint(lat=float(args.lat), lon=float(args.lon)),
        )
    except ValidationError as e:
        print(f"error: {e.errors()[0]['msg']}", file=sys.stderr)
        return 1

    result = convert_point(request, settings=settings)

    if args.json:
        print(result.model_dump_json(indent=2))
        return 0

    p = settings.output.precision
    print(f"{result.output.lat:.{p}f} {result.output.lon:.{p}f}")
    if not result.in_region:
        print("note: point is outside the GCJ-02 region; WGS-84 <-> GCJ-02 left it unchanged", file=sys.stderr)
    return 0


def _cmd_systems(_: argparse.Namespace) -> int:
    for system in GeodeticSystem:
        print(f"{system.value:<6} {_SYSTEM_DESCRIPTIONS[system]}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the coordshift CLI."""
    parser = argparse.ArgumentParser(prog="coordshift")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override settings.app.log_level",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    conv = sub.add_parser("convert", help="Convert one coordinate between geodetic systems.")
    conv.add_argument("--from", dest="source", required=True, help="wgs84 | gcj02 | bd09")
    conv.add_argument("--to", dest="target", required=True, help="wgs84 | gcj02 | bd09")
    conv.add_argument("--lat", required=True, type=float)
    conv.add_argument("--lon", required=True, type=float)
    conv.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    conv.set_defaults(func=_cmd_convert)

    ls = sub.add_parser("systems", help="List supported geodetic systems.")
    ls.set_defaults(func=_cmd_systems)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m coordshift.cli`."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValidationError as e:
        print(f"error: invalid settings: {e}", file=sys.stderr)
        return 1
    func: Any = getattr(args, "func")
    try:
        return int(func(args))
    except CoordShiftError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
