# loader.py
import logging
from typing import Iterable, List, Optional
import numpy as np

from summit_pathfinder.config import GOAL_MARKER, MAX_ELEVATION, MIN_ELEVATION, START_MARKER
from summit_pathfinder.errors import IoFailure, MalformedInput
from summit_pathfinder.models import Coordinate, GridMap

logger = logging.getLogger(__name__)


# region Character Decoding
def _char_elevation(ch: str) -> Optional[int]:
    if ch == START_MARKER:
        return MIN_ELEVATION
    if ch == GOAL_MARKER:
        return MAX_ELEVATION
    if "a" <= ch <= "z":
        return ord(ch) - ord("a")
    return None
# endregion

# region Grid Parsing
def parse_grid(lines: Iterable[str]) -> GridMap:
    """Build a GridMap from rows of letters with exactly one S and one E."""
    rows = [line.rstrip("\r\n") for line in lines]
    while rows and not rows[-1]:
        rows.pop()
    if not rows:
        raise MalformedInput("input contains no grid rows")

    W = len(rows[0])
    origin: Optional[Coordinate] = None
    destination: Optional[Coordinate] = None
    heights: List[List[int]] = []

    for y, row in enumerate(rows):
        if len(row) != W:
            raise MalformedInput(f"row has length {len(row)}, expected {W}", row=y)
        values = []
        for x, ch in enumerate(row):
            h = _char_elevation(ch)
            if h is None:
                raise MalformedInput(f"invalid character {ch!r}", row=y, column=x)
            if ch == START_MARKER:
                if origin is not None:
                    raise MalformedInput(f"duplicate start marker {START_MARKER!r}", row=y, column=x)
                origin = (x, y)
            elif ch == GOAL_MARKER:
                if destination is not None:
                    raise MalformedInput(f"duplicate goal marker {GOAL_MARKER!r}", row=y, column=x)
                destination = (x, y)
            values.append(h)
        heights.append(values)

    if origin is None:
        raise MalformedInput(f"no start marker {START_MARKER!r} found")
    if destination is None:
        raise MalformedInput(f"no goal marker {GOAL_MARKER!r} found")

    grid = GridMap(np.array(heights, dtype=np.int16), origin, destination)
    logger.debug("parsed %dx%d grid, origin=%s destination=%s",
                 grid.width, grid.height, grid.origin, grid.destination)
    return grid
# endregion

# region File Loading
def read_grid(path) -> GridMap:
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise IoFailure(f"cannot read {path}: {e}", path=str(path)) from e
    logger.debug("read %d lines from %s", len(lines), path)
    return parse_grid(lines)
# endregion
