# region Imports
from typing import Callable, Optional
from summit_pathfinder.config import MAX_CLIMB
from summit_pathfinder.models import Coordinate, GridMap
# endregion

# region Step Rule
def can_step(grid: GridMap, a: Coordinate, b: Coordinate, max_climb: int = MAX_CLIMB) -> bool:
    """True if moving a -> b climbs at most `max_climb` levels (any drop is fine)."""
    return grid.elevation(b) <= grid.elevation(a) + max_climb
# endregion

# region Edge Cost Factory
def climb_cost_factory(
    grid: GridMap,
    max_climb: int = MAX_CLIMB,
) -> Callable[[int, int], Optional[int]]:
    if max_climb < 0:
        raise ValueError(f"max_climb must be non-negative, got {max_climb}")

    flat = grid.elevation_at

    # region Edge‑cost Function
    def edge_cost(u: int, v: int) -> Optional[int]:
        # u, v are linear cell indices of orthogonal neighbours
        if flat(v) > flat(u) + max_climb:
            return None
        return 1
    # endregion

    return edge_cost
# endregion
