# region Imports
from __future__ import annotations
import json
from typing import Optional, Sequence, Tuple
from summit_pathfinder.models import GridMap
# endregion

# region Route JSON
def write_route_json(
    path_xy: Sequence[Tuple[int, int]],
    out_path: str = "route.json",
    grid: Optional[GridMap] = None,
) -> None:
    """Export a route of (x, y) cells; elevations are included when `grid` is given."""
    positions = []
    for x, y in path_xy:
        pos = {"col": int(x), "row": int(y)}
        if grid is not None:
            pos["elevation"] = grid.elevation((int(x), int(y)))
        positions.append(pos)

    with open(out_path, "w") as f:
        json.dump({"positions": positions, "steps": max(len(positions) - 1, 0)}, f, indent=2)
# endregion
