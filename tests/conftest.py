import os
import random
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from maze_config import MazeConfig  # noqa: E402
from maze_controller import MazeController  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_maze_env(monkeypatch):
    for name in ("MAZE_SIZE", "MAZE_SEED", "MAZE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def controller():
    return MazeController(MazeConfig(size=9, seed=1234))


@pytest.fixture
def rng():
    return random.Random(4242)
