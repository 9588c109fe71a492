"""Terminal front-end for the 3D maze.

Shows the current cross-section as ASCII and reads one command per line:

  a / d   move left / right along the first visible axis
  w / s   move up / down along the second visible axis
  r       rotate the visible axis pair (XY -> XZ -> YZ)
  q       quit

Run `python play.py --help` for options.
"""

import argparse
import logging
import sys
from typing import Iterable, Optional, TextIO, Tuple

import numpy as np

from maze_base import Cell
from maze_config import MazeConfig, log_level_from_env
from maze_controller import Direction, MazeController

GLYPHS = {
    Cell.OUTER_WALL: "@",
    Cell.WALL: "#",
    Cell.CELL: " ",
    Cell.START: "S",
    Cell.END: "E",
    Cell.UNVISITED: "?",
}

KEYMAP = {
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
}
ROTATE = "r"
QUIT = "q"


def render_slice(view: np.ndarray, cursor: Optional[Tuple[int, int]] = None) -> str:
    """One text row per second-axis index, so left/right run across and up/down run down."""
    rows = []
    first, second = view.shape
    for b in range(second):
        row = []
        for a in range(first):
            if (a, b) == cursor:
                row.append("P")
            else:
                row.append(GLYPHS[Cell(int(view[a, b]))])
        rows.append("".join(row))
    return "\n".join(rows)


def draw(controller: MazeController, out: TextIO) -> None:
    a, b = controller.axis.visible
    cursor = (controller.position[a], controller.position[b])
    print(render_slice(controller.current_slice(), cursor), file=out)
    for line in controller.hud_lines():
        print(line, file=out)


def run(controller: MazeController, lines: Iterable[str], out: Optional[TextIO] = None) -> int:
    if out is None:
        out = sys.stdout
    draw(controller, out)
    for line in lines:
        key = line.strip().lower()
        if key == QUIT:
            break
        if key == ROTATE:
            controller.handle_rotate()
        elif key in KEYMAP:
            controller.handle_move(KEYMAP[key])
        elif key:
            print(f"unknown command: {key!r}", file=out)
            continue
        if controller.check_win():
            print(f"maze solved! score={controller.score}", file=out)
        draw(controller, out)
    return controller.score


def parse_args(argv: list) -> argparse.Namespace:
    env = MazeConfig.from_env()
    parser = argparse.ArgumentParser(
        description="Walk a 3D maze two axes at a time.",
        epilog="Environment: MAZE_SIZE, MAZE_SEED, MAZE_LOG_LEVEL (flags take precedence).",
    )
    parser.add_argument("--size", type=int, default=env.size, help=f"grid edge length (default: {env.size})")
    parser.add_argument("--seed", type=int, default=env.seed, help="random seed for reproducible mazes")
    parser.add_argument(
        "--log-level",
        default=logging.getLevelName(log_level_from_env()),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    controller = MazeController(MazeConfig(size=args.size, seed=args.seed))
    score = run(controller, sys.stdin)
    print(f"final score: {score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
