"""Command line interface.

Usage:
    python -m geodist.cli distance 51.5074 -0.1278 48.8566 2.3522
    python -m geodist.cli contains --paths areas.yaml 48.8584 2.2945
"""

import argparse
import logging
import sys
from typing import List, Optional

import yaml

from .gps.errors import ShapeError
from .gps.shapes import is_selected, load_map_paths
from .utils.config import GeoConfig
from .utils.geodesy import haversine_distance
from .utils.logging import get_logger

logger = logging.getLogger("geodist")


def _cmd_distance(args: argparse.Namespace) -> int:
    d = haversine_distance(args.lat1, args.lon1, args.lat2, args.lon2)
    logger.debug("distance (%s, %s) -> (%s, %s) = %r m",
                 args.lat1, args.lon1, args.lat2, args.lon2, d)
    print(f"{d:.2f}")
    return 0


def _cmd_contains(args: argparse.Namespace) -> int:
    try:
        paths = load_map_paths(args.paths)
    except ShapeError as exc:
        logger.error("Invalid map path in %s: %s", args.paths, exc)
        return 2
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logger.error("Cannot load map paths from %s: %s", args.paths, exc)
        return 2

    for i, mp in enumerate(paths):
        inside = mp.contains(args.lat, args.lon)
        kind = "eject" if mp.eject else "include"
        print(f"{i}: {mp.shape.value} ({kind}): {'inside' if inside else 'outside'}")

    selected = is_selected(paths, args.lat, args.lon)
    print("selected" if selected else "not selected")
    return 0 if selected else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geodist",
        description="Great-circle distances and GPS map areas"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_dist = sub.add_parser("distance", help="Print distance in metres between two points")
    for name in ("lat1", "lon1", "lat2", "lon2"):
        p_dist.add_argument(name, type=float, help=f"{name} in decimal degrees")
    p_dist.set_defaults(func=_cmd_distance)

    p_cont = sub.add_parser("contains", help="Test a point against map paths")
    p_cont.add_argument(
        "--paths",
        type=str,
        required=True,
        help="YAML file with a 'paths' list"
    )
    p_cont.add_argument("lat", type=float, help="Latitude in decimal degrees")
    p_cont.add_argument("lon", type=float, help="Longitude in decimal degrees")
    p_cont.set_defaults(func=_cmd_contains)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = GeoConfig.load(args.config) if args.config else GeoConfig()
    level = logging.DEBUG if args.verbose else cfg.log_level
    get_logger("geodist", level)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
