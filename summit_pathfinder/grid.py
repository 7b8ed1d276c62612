# region Imports
from typing import Iterator, Tuple
# endregion

# Orthogonal moves as (dx, dy); no diagonals, no wraparound
STEPS_4 = ((-1, 0), (1, 0), (0, -1), (0, 1))

# region Index Helpers
def rc_to_idx(x: int, y: int, W: int) -> int:
    return y * W + x


def idx_to_xy(i: int, W: int) -> Tuple[int, int]:
    return (i % W, i // W)
# endregion

# region Neighbor Generation
def neighbors_4(u: Tuple[int, int], W: int, H: int) -> Iterator[Tuple[int, int]]:
    x, y = u
    for dx, dy in STEPS_4:
        xx, yy = x + dx, y + dy
        if 0 <= xx < W and 0 <= yy < H:
            yield (xx, yy)
# endregion
