# region Imports and Typing
from typing import Callable, List, Optional, Tuple
import heapq, logging, time
import numpy as np

from summit_pathfinder.config import UNREACHED
from summit_pathfinder.costs import climb_cost_factory
from summit_pathfinder.errors import SearchAborted
from summit_pathfinder.grid import neighbors_4
from summit_pathfinder.models import Coordinate, GridMap, SearchResult
# endregion

logger = logging.getLogger(__name__)

# region Path Reconstruction
def reconstruct(parent: List[int], goal: int, W: int) -> List[Coordinate]:
    path = []
    v = goal
    while v != -1:
        path.append((v % W, v // W))
        v = parent[v]
    path.reverse()
    return path
# endregion

# region Dijkstra Loop
def _run(
    grid: GridMap,
    s: int,
    t: Optional[int],
    edge_cost_fn: Callable[[int, int], Optional[int]],
    max_expansions: Optional[int],
    max_time_sec: Optional[float],
    max_distance: Optional[int],
) -> Tuple[List[Optional[int]], List[int], List[Coordinate], bool]:
    """
    Unit-weight Dijkstra over linear cell indices.

    Returns (dist, parent, expanded_order, reached_t). When `t` is None the
    whole reachable component is settled. Heap entries are
    (distance, counter, index); the counter makes ties FIFO.
    """
    t0 = time.time()
    W, H = grid.width, grid.height
    n = grid.size

    dist: List[Optional[int]] = [None] * n
    parent = [-1] * n
    visited = bytearray(n)
    expanded_order: List[Coordinate] = []

    dist[s] = 0
    counter = 0
    openh: List[Tuple[int, int, int]] = [(0, counter, s)]

    while openh:
        # region Time and Termination Checks
        if max_time_sec is not None and (time.time() - t0) > max_time_sec:
            raise SearchAborted(
                f"search from {grid.coord(s)} exceeded {max_time_sec}s",
                expansions=len(expanded_order),
            )
        # endregion

        d, _, u = heapq.heappop(openh)
        if visited[u]:
            continue
        if max_distance is not None and d > max_distance:
            break
        visited[u] = 1
        x, y = u % W, u // W
        expanded_order.append((x, y))

        if u == t:
            return dist, parent, expanded_order, True

        # region Expansion Limits
        if max_expansions is not None and len(expanded_order) >= max_expansions:
            raise SearchAborted(
                f"search from {grid.coord(s)} hit the {max_expansions} expansion cap",
                expansions=len(expanded_order),
            )
        # endregion

        # region Neighbor Loop
        for xx, yy in neighbors_4((x, y), W, H):
            v = yy * W + xx
            if visited[v]:
                continue
            c = edge_cost_fn(u, v)
            if c is None:
                continue
            alt = d + c
            old = dist[v]
            if old is None or alt < old:
                dist[v] = alt
                parent[v] = u
                counter += 1
                heapq.heappush(openh, (alt, counter, v))
        # endregion

    return dist, parent, expanded_order, False
# endregion

# region Public API
def search(
    grid: GridMap,
    start: Coordinate,
    goal: Optional[Coordinate] = None,
    *,
    edge_cost_fn: Optional[Callable[[int, int], Optional[int]]] = None,
    max_expansions: Optional[int] = None,
    max_time_sec: Optional[float] = None,
    max_distance: Optional[int] = None,
) -> SearchResult:
    """
    Shortest route from `start` to `goal` (default: the grid's destination).

    A result with distance None means the goal cannot be reached (or lies
    farther than `max_distance`). Exceeding `max_expansions` or
    `max_time_sec` raises SearchAborted instead.
    """
    goal = grid.destination if goal is None else goal
    s, t = grid.index(start), grid.index(goal)
    if s == t:
        return SearchResult(0, [grid.coord(s)], 0, [grid.coord(s)])

    edge_cost = edge_cost_fn or climb_cost_factory(grid)
    dist, parent, expanded_order, reached = _run(
        grid, s, t, edge_cost, max_expansions, max_time_sec, max_distance
    )
    if not reached:
        logger.debug("no route %s -> %s after %d expansions", start, goal, len(expanded_order))
        return SearchResult(None, None, len(expanded_order), expanded_order)

    logger.debug("route %s -> %s: %d steps, %d expansions", start, goal, dist[t], len(expanded_order))
    return SearchResult(dist[t], reconstruct(parent, t, grid.width), len(expanded_order), expanded_order)


def shortest_path(grid: GridMap, start: Coordinate, **kwargs) -> Optional[int]:
    return search(grid, start, **kwargs).distance


def distance_field(grid: GridMap, start: Coordinate) -> np.ndarray:
    """Exact step counts from `start` to every cell, UNREACHED where none exists."""
    dist, _, _, _ = _run(grid, grid.index(start), None, climb_cost_factory(grid), None, None, None)
    field = np.array([UNREACHED if d is None else d for d in dist], dtype=np.int64)
    return field.reshape(grid.height, grid.width)
# endregion
