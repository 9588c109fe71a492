from enum import Enum, IntEnum
from typing import Optional, Tuple

import numpy as np

# grid[x, y, z] holds Cell codes (uint8).
# Odd coordinates are rooms, even coordinates are the walls between them.

Vec2 = Tuple[int, int]
Vec3 = Tuple[int, int, int]
Grid = np.ndarray


class MazeInvariantError(RuntimeError):
    """Raised when the grid or the cursor is in a state generation never produces."""


class Cell(IntEnum):
    OUTER_WALL = 0
    CELL = 1  # carved, open
    WALL = 2
    START = 3
    UNVISITED = 4
    END = 5

    @property
    def is_traversable(self) -> bool:
        return self in (Cell.CELL, Cell.START, Cell.END)


class Axis(Enum):
    """
    Which two coordinates a cross-section shows:
      XY -> view[x, y] at fixed z
      XZ -> view[x, z] at fixed y
      YZ -> view[y, z] at fixed x
    """

    XY = "XY"
    XZ = "XZ"
    YZ = "YZ"

    @property
    def visible(self) -> Tuple[int, int]:
        return _VISIBLE[self]

    @property
    def fixed(self) -> int:
        return _FIXED[self]

    def next(self) -> "Axis":
        return _NEXT[self]


_VISIBLE = {Axis.XY: (0, 1), Axis.XZ: (0, 2), Axis.YZ: (1, 2)}
_FIXED = {Axis.XY: 2, Axis.XZ: 1, Axis.YZ: 0}
_NEXT = {Axis.XY: Axis.XZ, Axis.XZ: Axis.YZ, Axis.YZ: Axis.XY}


def create_empty(n: int) -> Grid:
    return np.full((n, n, n), Cell.UNVISITED, dtype=np.uint8)


def is_traversable(value) -> bool:
    return int(value) in (Cell.CELL, Cell.START, Cell.END)


def slice_at(grid: Grid, axis: Axis, index: int) -> np.ndarray:
    """
    Returns a read-only view of `grid` with `axis.fixed` pinned at `index`.
    The view shares memory with the grid, so it goes stale as soon as the
    grid is replaced; take a fresh one per query.
    """
    n = grid.shape[axis.fixed]
    if not 0 <= index < n:
        raise IndexError(f"slice index {index} out of range for {axis.value} (size {n})")

    selector = [slice(None)] * 3
    selector[axis.fixed] = index
    view = grid[tuple(selector)]
    view.flags.writeable = False
    return view


def find(grid: Grid, target: Cell) -> Optional[Vec3]:
    # argwhere walks in C order: x outermost, z innermost
    hits = np.argwhere(grid == target)
    if len(hits) == 0:
        return None
    x, y, z = hits[0]
    return int(x), int(y), int(z)


def sub_slice(view: np.ndarray, start: Vec2, length: Vec2) -> np.ndarray:
    """
    Inclusive rectangle [a, a+la] x [b, b+lb] of a slice.
    A (0, 0) length therefore still yields a single cell.
    """
    (a, b), (la, lb) = start, length
    rows, cols = view.shape
    if min(a, b, la, lb) < 0:
        raise IndexError(f"negative sub-slice bounds start={start} length={length}")
    if a + la >= rows or b + lb >= cols:
        raise IndexError(
            f"sub-slice start={start} length={length} exceeds slice shape {view.shape}"
        )
    return view[a : a + la + 1, b : b + lb + 1]
