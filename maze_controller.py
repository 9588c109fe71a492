import logging
import random
from enum import Enum
from typing import List, Optional

import numpy as np

from maze_base import Axis, Cell, Grid, MazeInvariantError, Vec3, find, is_traversable, slice_at
from maze_config import MazeConfig
from maze_gen import START, generate_maze

logger = logging.getLogger(__name__)


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


# (which visible coordinate, delta); LEFT/RIGHT use the first, UP/DOWN the second
_MOVES = {
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
    Direction.UP: (1, -1),
    Direction.DOWN: (1, 1),
}


class MazeController:
    """
    Player state inside a 3D maze seen one cross-section at a time.
      grid[x, y, z] = Cell codes, see maze_base
    Long-lived: grid, end_pos, score (survive a level change, except the grid).
    Short-lived: position and axis, reset to (1,1,1) / XY on every new maze.
    Moves happen in grid units, so walking between two rooms takes two steps
    (through the opened wall cell).
    """

    def __init__(self, config: Optional[MazeConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or MazeConfig()
        self.rng = rng or random.Random(self.config.seed)

        self.grid: Grid = None
        self.end_pos: Vec3 = START
        self.score = 0
        self.position: Vec3 = START
        self.axis = Axis.XY

        self.reset()

    @property
    def size(self) -> int:
        return self.config.size

    def reset(self, keep_score: bool = False):
        self.grid = generate_maze(self.config.size, rng=self.rng)
        end = find(self.grid, Cell.END)
        if end is None:
            raise MazeInvariantError("generated maze has no End cell")
        self.end_pos = end
        if not keep_score:
            self.score = 0
        self.position = START
        self.axis = Axis.XY

    def current_slice(self) -> np.ndarray:
        return slice_at(self.grid, self.axis, self.position[self.axis.fixed])

    def _candidate(self, direction: Direction) -> Vec3:
        which, delta = _MOVES[direction]
        coord = self.axis.visible[which]
        pos = list(self.position)
        pos[coord] += delta
        # the outer wall should always stop us first
        if not 0 <= pos[coord] < self.size:
            raise MazeInvariantError(f"move {direction.value} from {self.position} leaves the grid")
        return pos[0], pos[1], pos[2]

    def handle_move(self, direction: Direction) -> bool:
        """Moves one unit within the visible plane; returns False on a wall bump."""
        candidate = self._candidate(direction)
        view = self.current_slice()
        a, b = self.axis.visible
        if not is_traversable(view[candidate[a], candidate[b]]):
            logger.debug("bump %s at %s axis=%s", direction.value, self.position, self.axis.value)
            return False
        self.position = candidate
        return True

    def handle_rotate(self) -> Axis:
        self.axis = self.axis.next()
        logger.debug("axis -> %s", self.axis.value)
        return self.axis

    def check_win(self) -> bool:
        if self.position != self.end_pos:
            return False
        self.score += 1
        logger.info("level complete score=%d end=%s", self.score, self.end_pos)
        self.reset(keep_score=True)
        return True

    def hud_lines(self) -> List[str]:
        return [
            f"Current position: {self.position}",
            f"Start position: {START}",
            f"End position: {self.end_pos}",
            f"Current Axis: {self.axis.value}",
            f"Score: {self.score}",
        ]
