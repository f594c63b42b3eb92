"""Kalah engine with a search-based computer opponent."""

from . import core, env, evaluation, game, search, validation
from .core import (
    Board,
    IllegalMoveError,
    InvalidConfigurationError,
    InvalidStateError,
    InvariantViolationError,
    KalahError,
    MoveRecord,
    Outcome,
    Player,
    apply_move,
)
from .env import KalahEnv
from .evaluation import EvaluationResult, RandomPolicy, SearchPolicy, evaluate_policies
from .game import GameConfig, Kalah, MoveAttempt, load_config
from .search import SearchConfig, SearchResult, depth_for_level, search_best_pit

__all__ = [
    "core",
    "env",
    "evaluation",
    "game",
    "search",
    "validation",
    "Board",
    "MoveRecord",
    "Outcome",
    "Player",
    "apply_move",
    "KalahError",
    "IllegalMoveError",
    "InvalidConfigurationError",
    "InvalidStateError",
    "InvariantViolationError",
    "KalahEnv",
    "EvaluationResult",
    "RandomPolicy",
    "SearchPolicy",
    "evaluate_policies",
    "GameConfig",
    "Kalah",
    "MoveAttempt",
    "load_config",
    "SearchConfig",
    "SearchResult",
    "depth_for_level",
    "search_best_pit",
]
