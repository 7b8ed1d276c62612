# models.py
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import numpy as np

from summit_pathfinder.config import MAX_ELEVATION, MIN_ELEVATION
from summit_pathfinder.errors import MalformedInput
from summit_pathfinder.grid import idx_to_xy, neighbors_4, rc_to_idx

Coordinate = Tuple[int, int]  # (column, row)


@dataclass(eq=False)
class GridMap:
    """
    heights:     elevation per cell, shape (H, W), values in [0, 25]
    origin:      (x, y) of the start marker
    destination: (x, y) of the goal marker

    The array is copied and frozen on construction; nothing mutates a map
    once it has been built.
    """
    heights: np.ndarray
    origin: Coordinate
    destination: Coordinate
    _flat: List[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        arr = np.array(self.heights, dtype=np.int16)
        if arr.ndim != 2 or arr.size == 0:
            raise MalformedInput(f"elevation grid must be a non-empty 2-D array, got shape {arr.shape}")
        if arr.min() < MIN_ELEVATION or arr.max() > MAX_ELEVATION:
            raise MalformedInput(
                f"elevations must lie in [{MIN_ELEVATION}, {MAX_ELEVATION}], "
                f"got [{int(arr.min())}, {int(arr.max())}]"
            )
        arr.flags.writeable = False
        self.heights = arr
        self.origin = (int(self.origin[0]), int(self.origin[1]))
        self.destination = (int(self.destination[0]), int(self.destination[1]))
        for name, (x, y) in (("origin", self.origin), ("destination", self.destination)):
            if not self.in_bounds((x, y)):
                raise MalformedInput(f"{name} {(x, y)} lies outside the {self.width}x{self.height} grid")
        # flat int copy for the search loop
        self._flat = arr.ravel().tolist()

    @property
    def width(self) -> int:
        return int(self.heights.shape[1])

    @property
    def height(self) -> int:
        return int(self.heights.shape[0])

    @property
    def size(self) -> int:
        return int(self.heights.size)

    def in_bounds(self, coord: Coordinate) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, coord: Coordinate) -> int:
        if not self.in_bounds(coord):
            raise IndexError(f"{coord} is outside the {self.width}x{self.height} grid")
        return rc_to_idx(coord[0], coord[1], self.width)

    def coord(self, i: int) -> Coordinate:
        return idx_to_xy(i, self.width)

    def elevation(self, coord: Coordinate) -> int:
        return self._flat[self.index(coord)]

    def elevation_at(self, i: int) -> int:
        return self._flat[i]

    def neighbors(self, coord: Coordinate) -> List[Coordinate]:
        return list(neighbors_4(coord, self.width, self.height))

    def low_elevation_candidates(self) -> List[Coordinate]:
        """Every cell at the grid's minimum elevation, row-major."""
        ys, xs = np.nonzero(self.heights == self.heights.min())
        return [(int(x), int(y)) for y, x in zip(ys, xs)]


@dataclass
class SearchResult:
    distance: Optional[int]
    path: Optional[List[Coordinate]]
    expansions: int
    expanded_order: List[Coordinate]
