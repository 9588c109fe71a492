"""Grid model tests: empty grids, axis slicing, sub-slices and search."""

import numpy as np
import pytest

from maze_base import Axis, Cell, create_empty, find, is_traversable, slice_at, sub_slice

N = 8


def linear_grid(n: int = N) -> np.ndarray:
    # value == x + y*n + z*n*n, so an XY slice at depth z starts at z*n*n
    return np.arange(n ** 3, dtype=np.int64).reshape((n, n, n), order="F")


@pytest.mark.parametrize("n", [5, 8, 9])
def test_create_empty_all_unvisited(n):
    grid = create_empty(n)
    assert grid.shape == (n, n, n)
    assert grid.dtype == np.uint8
    assert (grid == Cell.UNVISITED).all()


def test_xy_slice_at_depth_one():
    grid = linear_grid()
    view = slice_at(grid, Axis.XY, 1)
    assert view.shape == (N, N)
    k = N * N
    assert view[0, 0] == k
    assert view[1, 0] == k + 1
    assert view[0, 1] == k + N
    assert view[N - 1, N - 1] == 2 * k - 1


def test_xz_and_yz_slices_fix_the_right_coordinate():
    grid = linear_grid()
    xz = slice_at(grid, Axis.XZ, 3)
    yz = slice_at(grid, Axis.YZ, 2)
    for a in range(N):
        for b in range(N):
            assert xz[a, b] == grid[a, 3, b]
            assert yz[a, b] == grid[2, a, b]


def test_slice_is_read_only_view():
    grid = create_empty(N)
    view = slice_at(grid, Axis.XY, 1)
    assert np.shares_memory(view, grid)
    with pytest.raises(ValueError):
        view[0, 0] = Cell.CELL
    grid[4, 5, 1] = Cell.END
    assert view[4, 5] == Cell.END


@pytest.mark.parametrize("index", [N, N + 3, -1])
def test_slice_index_out_of_range(index):
    with pytest.raises(IndexError):
        slice_at(create_empty(N), Axis.YZ, index)


def test_sub_slice_inclusive_bounds():
    view = slice_at(linear_grid(), Axis.XY, 1)
    k = N * N

    block = sub_slice(view, (0, 0), (1, 1))
    assert block.shape == (2, 2)
    assert sorted(block.ravel().tolist()) == [k, k + 1, k + N, k + N + 1]
    assert block[1, 0] == k + 1
    assert block[0, 1] == k + N

    shifted = sub_slice(view, (1, 1), (1, 1))
    assert sorted(shifted.ravel().tolist()) == [k + N + 1, k + N + 2, k + 2 * N + 1, k + 2 * N + 2]

    single = sub_slice(view, (0, 0), (0, 0))
    assert single.shape == (1, 1)
    assert single[0, 0] == k

    whole = sub_slice(view, (0, 0), (N - 1, N - 1))
    assert np.array_equal(whole, view)


@pytest.mark.parametrize(
    "start,length",
    [((0, 0), (N, N)), ((0, 0), (N, 0)), ((1, 0), (N - 1, 0)), ((0, 0), (-1, 0)), ((-1, 0), (1, 1))],
)
def test_sub_slice_out_of_range(start, length):
    view = slice_at(linear_grid(), Axis.XY, 1)
    with pytest.raises(IndexError):
        sub_slice(view, start, length)


def test_find_returns_first_in_scan_order():
    grid = create_empty(N)
    assert find(grid, Cell.END) is None
    grid[3, 0, 0] = Cell.END
    grid[2, 6, 7] = Cell.END
    assert find(grid, Cell.END) == (2, 6, 7)
    assert all(type(v) is int for v in find(grid, Cell.END))


def test_axis_rotation_cycle():
    assert Axis.XY.next() is Axis.XZ
    assert Axis.XZ.next() is Axis.YZ
    assert Axis.YZ.next() is Axis.XY
    for axis in Axis:
        assert axis.next().next().next() is axis
        assert sorted(axis.visible + (axis.fixed,)) == [0, 1, 2]


def test_traversable_cells():
    assert {c for c in Cell if c.is_traversable} == {Cell.CELL, Cell.START, Cell.END}
    assert is_traversable(np.uint8(Cell.START))
    assert not is_traversable(np.uint8(Cell.OUTER_WALL))
    assert not is_traversable(Cell.UNVISITED)
