"""Game session: one Kalah game in progress, with turn tracking."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from kalah.core import (
    Board,
    IllegalMoveError,
    InvalidConfigurationError,
    InvalidStateError,
    InvariantViolationError,
    MoveRecord,
    Outcome,
    Player,
    apply_move,
    initial_board,
    is_game_over,
    legal_pits,
    outcome,
)
from kalah.search import SearchConfig, SearchResult, search_best_pit
from kalah.validation import validate_board, validate_sweep

from .config import GameConfig, normalize_level

logger = logging.getLogger(__name__)


def _check_supplied_board(board: Board, config: GameConfig) -> None:
    if board.pits_per_player != config.pits_per_player:
        raise InvalidConfigurationError(
            f"Board has {board.pits_per_player} pits per player, expected {config.pits_per_player}."
        )
    try:
        validate_board(board, config.total_seeds)
    except InvariantViolationError as exc:
        raise InvalidConfigurationError(f"Board does not fit the configuration: {exc}") from exc


@dataclass(frozen=True)
class MoveAttempt:
    """Result of :meth:`Kalah.try_move`: either a new session or a rejection reason."""

    session: "Kalah"
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Kalah:
    """A single game between the human and the computer.

    Sessions behave as values: ``move`` and ``machine_move`` return a new
    session and leave the receiver untouched. Only the difficulty level is
    mutable in place, through ``set_level``.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        board: Optional[Board] = None,
        next_player: Optional[Player] = None,
        last_move: Optional[MoveRecord] = None,
        last_search: Optional[SearchResult] = None,
    ) -> None:
        self._config = config or GameConfig()
        if board is None:
            board = initial_board(self._config.pits_per_player, self._config.seeds_per_pit)
        else:
            _check_supplied_board(board, self._config)
        self._board = board
        self._next = next_player or self._config.opening_player
        self._last_move = last_move
        self._last_search = last_search

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    def new_game(self, pits_per_player: int, seeds_per_pit: int) -> "Kalah":
        """Start over on a fresh board, keeping level and opening player."""
        return Kalah(self._config.with_board(pits_per_player, seeds_per_pit))

    def switched(self) -> "Kalah":
        """Start over with the other side opening."""
        return Kalah(self._config.switched())

    def _advance(self, board: Board, record: MoveRecord, search: Optional[SearchResult] = None) -> "Kalah":
        validate_board(board, self._config.total_seeds)
        if record.game_over:
            validate_sweep(board)
        next_player = record.player if record.extra_turn else record.player.opposite
        logger.debug(
            "%s played pit %d (source=%s, target=%s, captured=%d, extra_turn=%s, game_over=%s)",
            record.player.value,
            record.pit,
            record.source_pit,
            record.target_pit,
            record.captured,
            record.extra_turn,
            record.game_over,
        )
        return Kalah(
            self._config,
            board=board,
            next_player=next_player,
            last_move=record,
            last_search=search,
        )

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------
    def move(self, pit: int) -> "Kalah":
        """Play ``pit`` (global numbering, 1..2n) for the player whose turn it is."""
        if self.is_game_over():
            raise IllegalMoveError("The game is already over.")
        n = self._config.pits_per_player
        if not 1 <= pit <= 2 * n:
            raise IllegalMoveError(f"Pit must be between 1 and {2 * n}.")

        owner = Player.HUMAN if pit <= n else Player.COMPUTER
        if owner is not self._next:
            raise IllegalMoveError(f"Pit {pit} belongs to the {owner.value}.")

        relative = pit if owner is Player.HUMAN else pit - n
        board, record = apply_move(self._board, self._next, relative)
        return self._advance(board, record)

    def try_move(self, pit: int) -> MoveAttempt:
        try:
            return MoveAttempt(self.move(pit))
        except IllegalMoveError as exc:
            return MoveAttempt(self, exc.reason)

    def machine_move(self) -> "Kalah":
        if self.is_game_over():
            raise InvalidStateError("The game is already over.")
        if self._next is not Player.COMPUTER:
            raise InvalidStateError("It is not the computer's turn.")

        config = SearchConfig(level=self._config.level, workers=self._config.search_workers)
        result = search_best_pit(self._board, Player.COMPUTER, config)
        board, record = apply_move(self._board, Player.COMPUTER, result.pit)
        return self._advance(board, record, search=result)

    def set_level(self, level: int) -> None:
        self._config = self._config.with_level(normalize_level(level))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def board(self) -> Board:
        return self._board

    @property
    def last_move(self) -> Optional[MoveRecord]:
        return self._last_move

    @property
    def last_search(self) -> Optional[SearchResult]:
        return self._last_search

    def next(self) -> Player:
        return self._next

    def is_game_over(self) -> bool:
        return is_game_over(self._board)

    def get_winner(self) -> Outcome:
        if not self.is_game_over():
            raise InvalidStateError("The game is not over yet.")
        return outcome(self._board)

    def get_seeds_of_player(self, player: Player) -> int:
        return self._board.store(player)

    def get_pits_per_player(self) -> int:
        return self._config.pits_per_player

    def get_seeds_per_pit(self) -> int:
        return self._config.seeds_per_pit

    def get_opening_player(self) -> Player:
        return self._config.opening_player

    def get_level(self) -> int:
        return self._config.level

    def source_pit_of_last_move(self) -> Optional[int]:
        return self._last_move.source_pit if self._last_move else None

    def target_pit_of_last_move(self) -> Optional[int]:
        return self._last_move.target_pit if self._last_move else None

    def legal_pits(self) -> List[int]:
        """Pits the player to move may choose, in global numbering."""
        offset = 0 if self._next is Player.HUMAN else self._config.pits_per_player
        return [pit + offset for pit in legal_pits(self._board, self._next)]

    def __str__(self) -> str:
        return self._board.render()

    def __repr__(self) -> str:
        return (
            f"Kalah(next={self._next.value}, level={self._config.level}, "
            f"over={self.is_game_over()})\n{self._board.render()}"
        )
