import matplotlib

matplotlib.use("Agg")

import pytest

from summit_pathfinder.loader import parse_grid

CANONICAL = """\
Sabqponm
abcryxxl
accszExk
acctuvwj
abdefghi
"""


@pytest.fixture
def canonical_text():
    return CANONICAL


@pytest.fixture
def canonical_grid():
    return parse_grid(CANONICAL.splitlines())


@pytest.fixture
def canonical_file(tmp_path):
    p = tmp_path / "input.txt"
    p.write_text(CANONICAL)
    return p
