from __future__ import annotations

from typing import List, Tuple

import numpy as np

from .errors import IllegalMoveError
from .state import (
    Board,
    MoveRecord,
    Outcome,
    Player,
    global_pit_number,
    opposite_index,
    owner_of,
    pit_index,
    store_index,
)

DEFAULT_PITS_PER_PLAYER = 6
DEFAULT_SEEDS_PER_PIT = 4


def initial_board(pits_per_player: int, seeds_per_pit: int) -> Board:
    if pits_per_player < 1:
        raise ValueError("pits_per_player must be at least 1.")
    if seeds_per_pit < 0:
        raise ValueError("seeds_per_pit must be non-negative.")
    cells = np.full(2 * pits_per_player + 2, seeds_per_pit, dtype=np.int64)
    cells[store_index(Player.HUMAN, pits_per_player)] = 0
    cells[store_index(Player.COMPUTER, pits_per_player)] = 0
    return Board(cells)


def is_game_over(board: Board) -> bool:
    return board.row_empty(Player.HUMAN) or board.row_empty(Player.COMPUTER)


def legal_pits(board: Board, player: Player) -> List[int]:
    if is_game_over(board):
        return []
    return [int(i) + 1 for i in np.flatnonzero(board.pits(player))]


def score_difference(board: Board, player: Player) -> int:
    return board.store(player) - board.store(player.opposite)


def outcome(board: Board) -> Outcome:
    difference = score_difference(board, Player.HUMAN)
    if difference > 0:
        return Outcome.HUMAN
    if difference < 0:
        return Outcome.COMPUTER
    return Outcome.TIE


def apply_move(board: Board, player: Player, pit: int) -> Tuple[Board, MoveRecord]:
    """Sow the seeds of ``pit`` (relative to ``player``) and return the successor.

    The input board is left untouched. Captures, the extra-turn flag and the
    end-of-game sweep are all resolved before the new board is returned.
    """
    n = board.pits_per_player
    if not 1 <= pit <= n:
        raise IllegalMoveError(f"Pit must be between 1 and {n}.")
    if is_game_over(board):
        raise IllegalMoveError("The game is already over.")

    source = pit_index(player, pit, n)
    seeds = int(board.cells[source])
    if seeds == 0:
        raise IllegalMoveError(f"Pit {global_pit_number(source, n)} is empty.")

    cells = board.cells.copy()
    own_store = store_index(player, n)
    skipped_store = store_index(player.opposite, n)

    cells[source] = 0
    position = source
    while seeds > 0:
        position = (position + 1) % cells.size
        # A lap passes over the source pit as well, so it stays empty.
        if position == skipped_store or position == source:
            continue
        cells[position] += 1
        seeds -= 1

    captured = 0
    if position != own_store and owner_of(position, n) is player and cells[position] == 1:
        opposite = opposite_index(position, n)
        captured = 1 + int(cells[opposite])
        cells[own_store] += captured
        cells[position] = 0
        cells[opposite] = 0

    game_over = _sweep_if_finished(cells, n)
    record = MoveRecord(
        player=player,
        pit=pit,
        source_pit=global_pit_number(source, n),
        target_pit=global_pit_number(position, n),
        extra_turn=position == own_store and not game_over,
        captured=captured,
        game_over=game_over,
    )
    return Board(cells), record


def _sweep_if_finished(cells: np.ndarray, n: int) -> bool:
    human = slice(0, n)
    computer = slice(n + 1, 2 * n + 1)
    if cells[human].any() and cells[computer].any():
        return False
    for player, row in ((Player.HUMAN, human), (Player.COMPUTER, computer)):
        cells[store_index(player, n)] += cells[row].sum()
        cells[row] = 0
    return True
