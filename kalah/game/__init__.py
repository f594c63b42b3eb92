"""Game session and configuration."""

from .config import (
    DEFAULT_LEVEL,
    GameConfig,
    load_config,
    merge_config,
    normalize_level,
    normalize_pits,
    normalize_player,
    normalize_seeds,
    normalize_workers,
)
from .session import Kalah, MoveAttempt

__all__ = [
    "DEFAULT_LEVEL",
    "GameConfig",
    "Kalah",
    "MoveAttempt",
    "load_config",
    "merge_config",
    "normalize_level",
    "normalize_pits",
    "normalize_player",
    "normalize_seeds",
    "normalize_workers",
]
