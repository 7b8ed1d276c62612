"""Fewest-step routes over letter elevation grids (climb one level, drop any)."""
from summit_pathfinder.dijkstra_core import distance_field, search, shortest_path
from summit_pathfinder.errors import (
    IoFailure,
    MalformedInput,
    PathfinderError,
    SearchAborted,
    Unreachable,
)
from summit_pathfinder.loader import parse_grid, read_grid
from summit_pathfinder.low_points import best_low_point, minimum_distance_from_low_points
from summit_pathfinder.models import GridMap, SearchResult

__version__ = "0.1.0"
