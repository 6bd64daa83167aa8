"""Command-line entry point for querying a planetary DEM.

Usage:
    planetary-dem DEM.tif info
    planetary-dem DEM.tif value X Y
    planetary-dem DEM.tif area X Y WIDTH HEIGHT
    planetary-dem DEM.tif extrema
    planetary-dem --gsd 463 DEM.tif latlong X Y

Results are written to stdout as JSON. Failures print "ERROR: ..." to stderr
and exit with status 1.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from domain.elevation.errors import ElevationError
from domain.elevation.store import RasterStore
from domain.elevation.value_objects import (
    DEFAULT_GROUND_SAMPLE_DISTANCE_M,
    MARS_MEAN_RADIUS_M,
    AreaRequest,
    PixelCoordinate,
    PlanetaryScale,
)
from infrastructure.elevation import GeoTiffElevationAdapter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="planetary-dem",
        description="Pixel-indexed elevation queries over a planetary DEM GeoTIFF",
    )
    parser.add_argument("raster", help="Path to a single-band DEM GeoTIFF")
    parser.add_argument(
        "--gsd",
        type=float,
        default=DEFAULT_GROUND_SAMPLE_DISTANCE_M,
        help="Ground sample distance per pixel (default: %(default)s)",
    )
    parser.add_argument(
        "--radius",
        type=float,
        default=MARS_MEAN_RADIUS_M,
        help="Spherical body radius, same unit as --gsd (default: %(default)s)",
    )
    parser.add_argument(
        "--max-bytes",
        type=int,
        default=None,
        help="Refuse rasters whose decoded grid exceeds this many bytes",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("info", help="Print raster dimensions and source path")

    value = commands.add_parser("value", help="Elevation at one pixel")
    value.add_argument("x", type=float)
    value.add_argument("y", type=float)

    area = commands.add_parser("area", help="Elevations in a pixel rectangle")
    area.add_argument("x", type=int)
    area.add_argument("y", type=int)
    area.add_argument("width", type=int)
    area.add_argument("height", type=int)

    commands.add_parser("extrema", help="Minimum and maximum elevation")

    latlong = commands.add_parser(
        "latlong", help="Convert a pixel to planetographic latitude/longitude"
    )
    latlong.add_argument("x", type=float)
    latlong.add_argument("y", type=float)

    return parser


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Load the raster and execute the selected query."""
    store = RasterStore(GeoTiffElevationAdapter(max_bytes=args.max_bytes))
    store.load(
        args.raster,
        PlanetaryScale(ground_sample_distance=args.gsd, body_radius=args.radius),
    )

    if args.command == "info":
        return {
            "path": store.map_path(),
            "width": store.get_width(),
            "height": store.get_height(),
        }
    if args.command == "value":
        return {"x": args.x, "y": args.y, "elevation": store.get_value(args.x, args.y)}
    if args.command == "area":
        request = AreaRequest(
            origin_x=args.x, origin_y=args.y, width=args.width, height=args.height
        )
        return {"elevations": store.get_elevations_in_area(request).tolist()}
    if args.command == "extrema":
        return {"min": store.get_min_value(), "max": store.get_max_value()}
    if args.command == "latlong":
        converted = store.to_planetographic(PixelCoordinate(x=args.x, y=args.y))
        return {"latitude": converted.x, "longitude": converted.y}
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        0 on success, 1 on failure
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level, format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        result = run(args)
    except ElevationError as e:
        logger.debug("Query failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
