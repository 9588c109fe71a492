import logging
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_SIZE = 8
MIN_SIZE = 5


def _int_env(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class MazeConfig:
    size: int = DEFAULT_SIZE
    seed: Optional[int] = None

    def __post_init__(self):
        if self.size < MIN_SIZE:
            raise ValueError(f"size must be at least {MIN_SIZE}, got {self.size}")

    @classmethod
    def from_env(cls) -> "MazeConfig":
        size = _int_env("MAZE_SIZE")
        return cls(size=DEFAULT_SIZE if size is None else size, seed=_int_env("MAZE_SEED"))


def log_level_from_env(default: str = "INFO") -> int:
    name = os.getenv("MAZE_LOG_LEVEL", default).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


__all__ = ["MazeConfig", "log_level_from_env", "DEFAULT_SIZE", "MIN_SIZE"]
