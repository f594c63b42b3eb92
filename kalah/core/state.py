from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

BoardArray = NDArray[np.int64]


class Player(Enum):
    HUMAN = "human"
    COMPUTER = "computer"

    @property
    def opposite(self) -> "Player":
        return Player.COMPUTER if self is Player.HUMAN else Player.HUMAN


class Outcome(Enum):
    HUMAN = "human"
    COMPUTER = "computer"
    TIE = "tie"


@dataclass(frozen=True)
class MoveRecord:
    player: Player
    pit: int  # relative to the mover, 1..n
    source_pit: int  # global numbering, 1..2n
    target_pit: Optional[int]  # global numbering, None for a store
    extra_turn: bool = False
    captured: int = 0
    game_over: bool = False


def store_index(player: Player, pits_per_player: int) -> int:
    return pits_per_player if player is Player.HUMAN else 2 * pits_per_player + 1


def pit_index(player: Player, pit: int, pits_per_player: int) -> int:
    if player is Player.HUMAN:
        return pit - 1
    return pits_per_player + pit


def owner_of(index: int, pits_per_player: int) -> Player:
    return Player.HUMAN if index <= pits_per_player else Player.COMPUTER


def opposite_index(index: int, pits_per_player: int) -> int:
    return 2 * pits_per_player - index


def global_pit_number(index: int, pits_per_player: int) -> Optional[int]:
    """Map a cell index to the 1..2n counter-clockwise pit number (None for stores)."""
    if index < pits_per_player:
        return index + 1
    if index == pits_per_player or index == 2 * pits_per_player + 1:
        return None
    return index


@dataclass(frozen=True, eq=False)
class Board:
    """Immutable snapshot of every pit and store.

    ``cells`` is laid out counter-clockwise as
    ``[human pits 1..n, human store, computer pits 1..n, computer store]``
    and is flagged read-only, so a Board can be shared freely between
    sessions and search threads.
    """

    cells: BoardArray
    pits_per_player: int = field(init=False)

    def __post_init__(self) -> None:
        cells = np.array(self.cells, dtype=np.int64)
        if cells.ndim != 1 or cells.size < 4 or cells.size % 2 != 0:
            raise ValueError(f"board vector has invalid shape {cells.shape}")
        cells.setflags(write=False)
        object.__setattr__(self, "cells", cells)
        object.__setattr__(self, "pits_per_player", cells.size // 2 - 1)

    @classmethod
    def from_pits(
        cls,
        human_pits: Sequence[int],
        computer_pits: Sequence[int],
        *,
        human_store: int = 0,
        computer_store: int = 0,
    ) -> "Board":
        if len(human_pits) != len(computer_pits):
            raise ValueError("both players need the same number of pits")
        cells = list(human_pits) + [human_store] + list(computer_pits) + [computer_store]
        return cls(np.asarray(cells, dtype=np.int64))

    def pits(self, player: Player) -> BoardArray:
        start = pit_index(player, 1, self.pits_per_player)
        return self.cells[start : start + self.pits_per_player]

    def store(self, player: Player) -> int:
        return int(self.cells[store_index(player, self.pits_per_player)])

    def seeds(self, player: Player, pit: int) -> int:
        return int(self.cells[pit_index(player, pit, self.pits_per_player)])

    def row_empty(self, player: Player) -> bool:
        return not np.any(self.pits(player))

    def total_seeds(self) -> int:
        return int(self.cells.sum())

    def as_tuple(self) -> Tuple[int, ...]:
        return tuple(int(v) for v in self.cells)

    def render(self) -> str:
        width = max(2, len(str(int(self.cells.max()))))
        computer = " ".join(f"{int(v):>{width}}" for v in self.pits(Player.COMPUTER)[::-1])
        human = " ".join(f"{int(v):>{width}}" for v in self.pits(Player.HUMAN))
        prefix = f"{self.store(Player.COMPUTER):>{width}} | "
        top = prefix + computer
        bottom = " " * len(prefix) + human + f" | {self.store(Player.HUMAN):>{width}}"
        return f"{top}\n{bottom}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __repr__(self) -> str:
        return f"Board(n={self.pits_per_player})\n{self.render()}"
