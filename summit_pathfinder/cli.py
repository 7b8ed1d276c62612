# cli.py - answer both hill-climb queries for an elevation grid file
import argparse
import logging
import sys
from typing import List, Optional

from summit_pathfinder.dijkstra_core import search
from summit_pathfinder.errors import PathfinderError, Unreachable
from summit_pathfinder.loader import read_grid
from summit_pathfinder.logging_utils import setup_logging
from summit_pathfinder.low_points import minimum_distance_from_low_points

logger = logging.getLogger(__name__)

_LEVELS = ["WARNING", "INFO", "DEBUG"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="summit-pathfinder",
        description="Fewest steps from S to E on a letter elevation grid, and from the best lowest cell.",
    )
    parser.add_argument("path", help="Grid file: rows of a-z with one S and one E")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Log more (-v info, -vv debug) to stderr")
    parser.add_argument("--max-time-sec", type=float, default=None,
                        help="Abort any single search that runs longer than this")
    parser.add_argument("--max-expansions", type=int, default=None,
                        help="Abort any single search that settles more cells than this")
    parser.add_argument("--plot", action="store_true",
                        help="Show the part 1 search as a heatmap")
    parser.add_argument("--png", metavar="OUT", default=None,
                        help="Write the elevation grid with the part 1 route as a PNG")
    parser.add_argument("--route-json", metavar="OUT", default=None,
                        help="Write the part 1 route as JSON")
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> None:
    grid = read_grid(args.path)
    limits = {"max_expansions": args.max_expansions, "max_time_sec": args.max_time_sec}

    result = search(grid, grid.origin, **limits)
    if result.distance is None:
        raise Unreachable(f"{grid.destination} cannot be reached from {grid.origin}", start=grid.origin)
    print(f"Part 1: {result.distance}")

    part_2 = minimum_distance_from_low_points(grid, **limits)
    print(f"Part 2: {part_2}")

    # region Optional Outputs
    if args.route_json:
        from summit_pathfinder.route_export import write_route_json
        write_route_json(result.path, args.route_json, grid=grid)
        logger.info("wrote route to %s", args.route_json)
    if args.png or args.plot:
        from summit_pathfinder.viz import render_elevation_png, show_search_heatmap
        if args.png:
            render_elevation_png(grid, args.png, path=result.path)
            logger.info("wrote elevation image to %s", args.png)
        if args.plot:
            show_search_heatmap(grid, result, title=f"S -> E in {result.distance} steps")
    # endregion


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(_LEVELS[min(args.verbose, len(_LEVELS) - 1)])
    try:
        run(args)
    except PathfinderError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
