import pytest

from kalah.core import Board, InvariantViolationError
from kalah.validation import SeedConservationError, validate_board, validate_sweep


def test_validate_board_ok():
    validate_board(Board.from_pits([1, 2], [3, 4], human_store=5), 15)


def test_validate_board_detects_lost_seeds():
    with pytest.raises(SeedConservationError):
        validate_board(Board.from_pits([1, 2], [3, 4]), 12)


def test_seed_conservation_error_is_fatal_invariant():
    assert issubclass(SeedConservationError, InvariantViolationError)


def test_validate_sweep_requires_empty_rows():
    validate_sweep(Board.from_pits([0, 0], [0, 0], human_store=3, computer_store=5))
    with pytest.raises(InvariantViolationError):
        validate_sweep(Board.from_pits([0, 0], [1, 0], computer_store=5))
