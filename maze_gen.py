import logging
import random
from typing import List, Optional

import numpy as np

from maze_base import Cell, Grid, Vec3, create_empty

# We carve a "perfect maze" using randomized DFS on odd cells.
# Every even coordinate is wall; carving opens the wall between two rooms.

logger = logging.getLogger(__name__)

START: Vec3 = (1, 1, 1)

# direction codes drawn uniformly from 0..5
_STEPS: List[Vec3] = [
    (1, 0, 0),   # 0 +X
    (0, 1, 0),   # 1 +Y
    (0, 0, 1),   # 2 +Z
    (-1, 0, 0),  # 3 -X
    (0, -1, 0),  # 4 -Y
    (0, 0, -1),  # 5 -Z
]


def _stamp_structure(grid: Grid) -> None:
    n = grid.shape[0]
    idx = np.indices(grid.shape)
    grid[(idx % 2 == 0).any(axis=0)] = Cell.WALL
    grid[((idx == 0) | (idx == n - 1)).any(axis=0)] = Cell.OUTER_WALL


def _unvisited(grid: Grid, p: Vec3) -> bool:
    # positions past the far edge count as "not unvisited"
    x, y, z = p
    sx, sy, sz = grid.shape
    if x >= sx or y >= sy or z >= sz:
        return False
    return grid[x, y, z] == Cell.UNVISITED


def _target(pos: Vec3, code: int) -> Optional[Vec3]:
    dx, dy, dz = _STEPS[code]
    x, y, z = pos[0] + 2 * dx, pos[1] + 2 * dy, pos[2] + 2 * dz
    if x < 0 or y < 0 or z < 0:
        return None
    return x, y, z


def _has_unvisited_neighbor(grid: Grid, pos: Vec3) -> bool:
    for code in range(len(_STEPS)):
        nxt = _target(pos, code)
        if nxt is not None and _unvisited(grid, nxt):
            return True
    return False


def generate_maze(size: int, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> Grid:
    """
    Returns:
      grid: numpy uint8 array [size, size, size] of Cell codes
    Notes:
      Start is always (1,1,1); End is the last room carved.
      Odd sizes use the whole cube, even sizes leave the N-2 plane as solid wall.
    """
    if size < 5:
        raise ValueError(f"maze size must be at least 5, got {size}")
    if rng is None:
        rng = random.Random(seed)

    grid = create_empty(size)
    _stamp_structure(grid)

    pos = START
    grid[pos] = Cell.START
    visited: List[Vec3] = [pos]
    tot_visited: List[Vec3] = [pos]

    while visited:
        if not _has_unvisited_neighbor(grid, pos):
            pos = visited.pop()
            continue

        # redraw until the direction is usable (not uniform over the open ones)
        while True:
            code = rng.randrange(len(_STEPS))
            nxt = _target(pos, code)
            if nxt is not None and _unvisited(grid, nxt):
                break

        dx, dy, dz = _STEPS[code]
        grid[nxt] = Cell.CELL
        grid[pos[0] + dx, pos[1] + dy, pos[2] + dz] = Cell.CELL
        visited.append(nxt)
        tot_visited.append(nxt)
        pos = nxt

    end = tot_visited.pop()
    grid[end] = Cell.END

    logger.debug("generated maze size=%d rooms=%d end=%s", size, len(tot_visited) + 1, end)
    return grid
