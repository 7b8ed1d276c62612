# region Imports
import logging
from typing import Optional, Tuple

from summit_pathfinder.dijkstra_core import search
from summit_pathfinder.errors import Unreachable
from summit_pathfinder.models import Coordinate, GridMap
# endregion

logger = logging.getLogger(__name__)

# region Candidate Sweep
def best_low_point(
    grid: GridMap,
    *,
    max_expansions: Optional[int] = None,
    max_time_sec: Optional[float] = None,
) -> Tuple[Coordinate, int]:
    """
    Run one search per minimum-elevation cell and keep the closest.

    Each search is capped one step below the best distance seen so far,
    so ties go to the candidate enumerated first.
    """
    candidates = grid.low_elevation_candidates()
    best: Optional[Tuple[Coordinate, int]] = None

    for cand in candidates:
        bound = None if best is None else best[1] - 1
        res = search(grid, cand, max_expansions=max_expansions,
                     max_time_sec=max_time_sec, max_distance=bound)
        if res.distance is None:
            continue
        logger.debug("candidate %s reaches %s in %d steps", cand, grid.destination, res.distance)
        if best is None or res.distance < best[1]:
            best = (cand, res.distance)

    if best is None:
        raise Unreachable(
            f"none of the {len(candidates)} lowest cells can reach {grid.destination}",
            start=candidates,
        )
    logger.info("best low point %s at %d steps (%d candidates)", best[0], best[1], len(candidates))
    return best


def minimum_distance_from_low_points(grid: GridMap, **kwargs) -> int:
    return best_low_point(grid, **kwargs)[1]
# endregion
