import numpy as np
import pytest

from dijkstra_map import (
    RANK_MAX,
    STEPS4,
    STEPS8,
    blank_dmap,
    diagonal_neighbours,
    grid_from_strings,
    manhattan_neighbours,
    offset_neighbours,
)


@pytest.fixture
def dmap():
    return blank_dmap(grid_from_strings(["...", "...", "..."]))


def test_reference_topologies_follow_offset_tables(dmap):
    for fn, steps in [(manhattan_neighbours, STEPS4), (diagonal_neighbours, STEPS8)]:
        offsets = [(p.x - 1, p.y - 1) for p in fn(dmap, 1, 1)]
        assert offsets == list(steps)


def test_manhattan_order(dmap):
    pts = [p.get_xy() for p in manhattan_neighbours(dmap, 1, 1)]
    assert pts == [(2, 1), (0, 1), (1, 0), (1, 2)]


def test_diagonal_order(dmap):
    pts = [p.get_xy() for p in diagonal_neighbours(dmap, 1, 1)]
    assert pts == [(2, 1), (0, 1), (1, 0), (1, 2), (2, 2), (2, 0), (0, 2), (0, 0)]


def test_corner_neighbours_off_map_are_max(dmap):
    dmap.points[:] = 3
    vals = {p.get_xy(): p.val for p in diagonal_neighbours(dmap, 0, 0)}
    assert vals[(-1, 0)] == RANK_MAX
    assert vals[(0, -1)] == RANK_MAX
    assert vals[(-1, -1)] == RANK_MAX
    assert vals[(1, 0)] == 3
    assert vals[(1, 1)] == 3


def test_offset_tables_match_reference(dmap):
    for steps, ref in [(STEPS4, manhattan_neighbours), (STEPS8, diagonal_neighbours)]:
        fn = offset_neighbours(steps)
        assert fn(dmap, 1, 1) == ref(dmap, 1, 1)
        assert fn(dmap, 0, 2) == ref(dmap, 0, 2)


def test_offset_topology_drives_calc():
    m = grid_from_strings(["....."])
    # only steps of two cells, so odd columns are never reached
    d = blank_dmap(m, offset_neighbours([(2, 0), (-2, 0)]))
    d.calc((0, 0))
    assert [d.value_at(x, 0).val for x in range(5)] == [0, RANK_MAX, 1, RANK_MAX, 2]

    ref = blank_dmap(m, offset_neighbours(STEPS4))
    ref.calc((0, 0))
    assert np.array_equal(ref.points, np.arange(5).reshape(1, 5))


def test_offset_neighbours_needs_offsets():
    with pytest.raises(ValueError):
        offset_neighbours([])
