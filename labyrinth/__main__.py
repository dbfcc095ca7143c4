"""
Command-line maze generation from a recorded path file.

    python -m labyrinth walk.json --entry 38.9001,-77.0301 --exit 38.9008,-77.0294
"""

import argparse
import logging
import sys
from typing import List, Optional

from labyrinth.config import DEFAULT_RESOLUTION_M, MAX_GRID_CELLS
from labyrinth.errors import MazeError
from labyrinth.models import Coordinate
from labyrinth.render import to_glyphs, to_png
from labyrinth.route_export import read_positions, write_route_latlon
from labyrinth.session import generate_maze

logger = logging.getLogger("labyrinth")


def parse_latlon(text: str) -> Coordinate:
    try:
        lat, lon = (float(v) for v in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected LAT,LON, got {text!r}")
    return Coordinate(lat, lon)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="labyrinth",
        description="Turn a recorded walk into a grid maze between an entry and an exit point",
    )
    parser.add_argument("path", help='JSON file with {"positions": [{"lat":..,"lon":..}, ...]}')
    parser.add_argument("--entry", type=parse_latlon, required=True, help="entry point LAT,LON")
    parser.add_argument("--exit", type=parse_latlon, required=True, help="exit point LAT,LON")
    parser.add_argument("--resolution", type=float, default=DEFAULT_RESOLUTION_M,
                        help="meters per grid cell (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible maze")
    parser.add_argument("--out", help="write the carved route as lat/lon JSON")
    parser.add_argument("--png", help="write the grid as a PNG image")
    parser.add_argument("--show", action="store_true", help="open a matplotlib window")
    parser.add_argument("--quiet", action="store_true", help="do not print the glyph grid")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        positions = read_positions(args.path)
        session = generate_maze(
            positions, args.entry, args.exit,
            resolution_m=args.resolution, seed=args.seed, max_cells=MAX_GRID_CELLS,
        )
    except (OSError, TypeError, ValueError, MazeError) as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1

    if not args.quiet:
        print(to_glyphs(session.grid))
    if args.out:
        write_route_latlon(session, args.out)
    if args.png:
        with open(args.png, "wb") as f:
            f.write(to_png(session.grid))
        logger.info("Wrote %dx%d grid to %s", session.spec.rows, session.spec.cols, args.png)
    if args.show:
        from labyrinth.viz import show_maze
        show_maze(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
