# region Imports
from summit_pathfinder.models import Coordinate
# endregion

# region Grid Distance
def manhattan(a: Coordinate, b: Coordinate) -> int:
    """Lower bound on the step count between two cells of a 4-connected grid."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
# endregion
