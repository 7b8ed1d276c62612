"""Tests for the single-source shortest path engine."""

import numpy as np
import pytest

from summit_pathfinder.config import UNREACHED
from summit_pathfinder.dijkstra_core import distance_field, search, shortest_path
from summit_pathfinder.errors import SearchAborted
from summit_pathfinder.geometry import manhattan
from summit_pathfinder.loader import parse_grid
from summit_pathfinder.models import GridMap


def test_canonical_part_one(canonical_grid):
    assert shortest_path(canonical_grid, canonical_grid.origin) == 31


def test_unit_step_grid():
    grid = GridMap(np.array([[0, 1]]), (0, 0), (1, 0))
    assert shortest_path(grid, grid.origin) == 1


def test_climb_limit_blocks_direct_ascent():
    grid = parse_grid(["SE"])
    assert shortest_path(grid, grid.origin) is None


def test_descent_is_free():
    grid = GridMap(np.array([[25, 0]]), (0, 0), (1, 0))
    assert shortest_path(grid, grid.origin) == 1


def test_start_equals_goal(canonical_grid):
    res = search(canonical_grid, canonical_grid.destination)
    assert res.distance == 0
    assert res.path == [canonical_grid.destination]


def test_result_path_is_valid_walk(canonical_grid):
    res = search(canonical_grid, canonical_grid.origin)
    assert res.path[0] == canonical_grid.origin
    assert res.path[-1] == canonical_grid.destination
    assert len(res.path) == res.distance + 1
    for a, b in zip(res.path, res.path[1:]):
        assert manhattan(a, b) == 1
        assert canonical_grid.elevation(b) <= canonical_grid.elevation(a) + 1


def test_unreachable_result_has_no_path():
    grid = parse_grid(["SE"])
    res = search(grid, grid.origin)
    assert res.distance is None
    assert res.path is None
    assert res.expansions == 1


def test_admissibility_for_every_reachable_start(canonical_grid):
    for y in range(canonical_grid.height):
        for x in range(canonical_grid.width):
            d = shortest_path(canonical_grid, (x, y))
            if d is not None:
                assert d >= manhattan((x, y), canonical_grid.destination)


def test_repeated_calls_are_deterministic(canonical_grid):
    first = search(canonical_grid, canonical_grid.origin)
    for _ in range(3):
        again = search(canonical_grid, canonical_grid.origin)
        assert again.distance == first.distance
        assert again.expanded_order == first.expanded_order


def test_matches_distance_field(canonical_grid):
    field = distance_field(canonical_grid, canonical_grid.origin)
    assert field.shape == (canonical_grid.height, canonical_grid.width)
    dx, dy = canonical_grid.destination
    assert field[dy, dx] == 31
    assert field[0, 0] == 0


def test_distance_field_marks_unreached():
    grid = GridMap(np.array([[0, 5, 0]]), (0, 0), (2, 0))
    field = distance_field(grid, (0, 0))
    assert field.tolist() == [[0, UNREACHED, UNREACHED]]


def test_explicit_goal():
    grid = GridMap(np.array([[0, 1, 2, 3]]), (0, 0), (3, 0))
    assert search(grid, (0, 0), (2, 0)).distance == 2
    assert search(grid, (3, 0), (0, 0)).distance == 3


def test_max_distance_cuts_search(canonical_grid):
    assert shortest_path(canonical_grid, canonical_grid.origin, max_distance=30) is None
    assert shortest_path(canonical_grid, canonical_grid.origin, max_distance=31) == 31


def test_expansion_cap_aborts(canonical_grid):
    with pytest.raises(SearchAborted) as exc:
        search(canonical_grid, canonical_grid.origin, max_expansions=5)
    assert exc.value.expansions == 5


def test_time_limit_aborts(canonical_grid):
    with pytest.raises(SearchAborted):
        search(canonical_grid, canonical_grid.origin, max_time_sec=-1.0)


def test_start_out_of_bounds(canonical_grid):
    with pytest.raises(IndexError):
        shortest_path(canonical_grid, (100, 0))


def test_custom_edge_cost(canonical_grid):
    # no climbing at all: S can only wander the flat 'a' cells
    flat = canonical_grid.elevation_at
    res = search(canonical_grid, canonical_grid.origin,
                 edge_cost_fn=lambda u, v: 1 if flat(v) <= flat(u) else None)
    assert res.distance is None


def test_heap_order_matches_naive_scan():
    rng = np.random.default_rng(7)
    heights = rng.integers(0, 4, size=(9, 11))
    grid = GridMap(heights, (0, 0), (10, 8))

    # O(V^2) scan over unvisited cells, kept as a reference
    def naive(start):
        dist = {start: 0}
        unvisited = {(x, y) for y in range(grid.height) for x in range(grid.width)}
        while True:
            known = [c for c in unvisited if c in dist]
            if not known:
                return None
            cur = min(known, key=lambda c: dist[c])
            for n in grid.neighbors(cur):
                if n in unvisited and grid.elevation(n) <= grid.elevation(cur) + 1:
                    dist[n] = min(dist.get(n, dist[cur] + 1), dist[cur] + 1)
            unvisited.discard(cur)
            if grid.destination not in unvisited:
                return dist[grid.destination]

    for y in range(grid.height):
        for x in range(grid.width):
            assert shortest_path(grid, (x, y)) == naive((x, y))
