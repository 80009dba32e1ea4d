import numpy as np
import pytest

from dijkstra_map import MaskGrid, grid_from_array, grid_from_strings


def test_grid_from_strings_shape_and_passability():
    m = grid_from_strings([
        "..#.",
        "#...",
    ])
    assert (m.width(), m.height()) == (4, 2)
    assert m.is_passable(0, 0)
    assert not m.is_passable(2, 0)
    assert not m.is_passable(0, 1)
    assert m.blocked.shape == (2, 4)


def test_custom_wall_characters():
    m = grid_from_strings(["~.T", "..."], wall="~T")
    assert not m.is_passable(0, 0)
    assert not m.is_passable(2, 0)
    assert m.is_passable(1, 0)


def test_out_of_bounds_agrees_with_size():
    m = grid_from_strings(["...", "..."])
    inside = [(x, y) for y in range(2) for x in range(3)]
    assert not any(m.is_out_of_bounds(x, y) for x, y in inside)
    for x, y in [(-1, 0), (0, -1), (3, 0), (0, 2)]:
        assert m.is_out_of_bounds(x, y)
        assert not m.is_passable(x, y)


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        grid_from_strings(["...", ".."])
    with pytest.raises(ValueError):
        grid_from_strings([])


def test_mask_must_be_2d():
    with pytest.raises(ValueError):
        MaskGrid(np.zeros(5, dtype=bool))


def test_grid_from_array():
    passable = np.array([[1, 0], [1, 1]])
    m = grid_from_array(passable)
    assert m.is_passable(0, 0)
    assert not m.is_passable(1, 0)
    assert m.is_passable(1, 1)
