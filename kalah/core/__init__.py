"""Core game logic: board values and the sowing rules."""

from .errors import (
    IllegalMoveError,
    InvalidConfigurationError,
    InvalidStateError,
    InvariantViolationError,
    KalahError,
)
from .state import Board, MoveRecord, Outcome, Player
from .rules import (
    DEFAULT_PITS_PER_PLAYER,
    DEFAULT_SEEDS_PER_PIT,
    apply_move,
    initial_board,
    is_game_over,
    legal_pits,
    outcome,
    score_difference,
)

__all__ = [
    "Board",
    "MoveRecord",
    "Outcome",
    "Player",
    "KalahError",
    "IllegalMoveError",
    "InvalidConfigurationError",
    "InvalidStateError",
    "InvariantViolationError",
    "DEFAULT_PITS_PER_PLAYER",
    "DEFAULT_SEEDS_PER_PIT",
    "apply_move",
    "initial_board",
    "is_game_over",
    "legal_pits",
    "outcome",
    "score_difference",
]
