"""
AlongLine CLI entrypoint.

This CLI is intended for quick local measurements without the HTTP API.
It delegates all geometry to `alongline.measure`.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from alongline.config.settings import get_settings
from alongline.core.logging import configure_logging
from alongline.domain.models import coerce_line, line_coordinates
from alongline.geometry.length import line_length
from alongline.measure import measure_along_line

UNIT_CHOICES = ["degrees", "radians", "miles", "kilometers"]


def _read_geojson(path: str) -> Any:
    """Read a GeoJSON document from a file path, or stdin when `path` is `-`."""
    text = sys.stdin.read() if path == "-" else Path(path).read_text(encoding="utf-8")
    return json.loads(text)


def _cmd_length(args: argparse.Namespace) -> int:
    settings = get_settings()
    units = args.units or settings.projection.default_units
    coords = line_coordinates(coerce_line(_read_geojson(args.line)))
    print(f"{line_length(coords, units):.6f} {units}")
    return 0


def _cmd_measure(args: argparse.Namespace) -> int:
    """Handle the `measure` subcommand."""
    result = measure_along_line(
        [float(args.lon), float(args.lat)],
        _read_geojson(args.line),
        args.units,
    )

    if args.json:
        print(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return 0

    lon, lat = result.closest.coordinates
    print(f"Closest point: {lon:.6f},{lat:.6f} (segment {result.index})")
    print(f"Distance to line: {result.distance_to_line:.6f} {result.units}")
    print(f"Travelled: {result.travelled:.6f} {result.units}")
    print(f"Total length: {result.total_length:.6f} {result.units}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the AlongLine CLI."""
    parser = argparse.ArgumentParser(prog="alongline")
    sub = parser.add_subparsers(dest="command", required=True)

    length = sub.add_parser("length", help="Print the total length of a LineString.")
    length.add_argument("--line", required=True, help="GeoJSON LineString Feature/Geometry file ('-' for stdin)")
    length.add_argument("--units", choices=UNIT_CHOICES, default=None)
    length.set_defaults(func=_cmd_length)

    m = sub.add_parser("measure", help="Find the closest point on a line and measure along it.")
    m.add_argument("--lon", required=True, type=float)
    m.add_argument("--lat", required=True, type=float)
    m.add_argument("--line", required=True, help="GeoJSON LineString Feature/Geometry file ('-' for stdin)")
    m.add_argument("--units", choices=UNIT_CHOICES, default=None)
    m.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    m.set_defaults(func=_cmd_measure)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m alongline.cli`."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    try:
        return int(func(args))
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
