from __future__ import annotations

import numpy as np

from kalah.core import Board, InvariantViolationError


class SeedConservationError(InvariantViolationError):
    pass


def validate_board(board: Board, expected_total: int) -> None:
    if (board.cells < 0).any():
        raise InvariantViolationError("board contains negative seed counts")
    total = board.total_seeds()
    if total != expected_total:
        raise SeedConservationError(f"board holds {total} seeds, expected {expected_total}")


def validate_sweep(board: Board) -> None:
    """A finished board must have both rows empty once the sweep has run."""
    n = board.pits_per_player
    pits = np.concatenate([board.cells[:n], board.cells[n + 1 : 2 * n + 1]])
    if pits.any():
        raise InvariantViolationError("finished board still has seeds in play")
