"""Game configuration and YAML loading."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional, Union

import yaml

from kalah.core import (
    DEFAULT_PITS_PER_PLAYER,
    DEFAULT_SEEDS_PER_PIT,
    InvalidConfigurationError,
    Player,
)

DEFAULT_LEVEL = 3


@dataclass(frozen=True)
class GameConfig:
    pits_per_player: int = DEFAULT_PITS_PER_PLAYER
    seeds_per_pit: int = DEFAULT_SEEDS_PER_PIT
    opening_player: Player = Player.HUMAN
    level: int = DEFAULT_LEVEL
    search_workers: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "pits_per_player", normalize_pits(self.pits_per_player))
        object.__setattr__(self, "seeds_per_pit", normalize_seeds(self.seeds_per_pit))
        object.__setattr__(self, "level", normalize_level(self.level))
        object.__setattr__(self, "opening_player", normalize_player(self.opening_player))
        object.__setattr__(self, "search_workers", normalize_workers(self.search_workers))

    @property
    def total_seeds(self) -> int:
        return 2 * self.pits_per_player * self.seeds_per_pit

    def with_board(self, pits_per_player: int, seeds_per_pit: int) -> "GameConfig":
        return replace(self, pits_per_player=pits_per_player, seeds_per_pit=seeds_per_pit)

    def with_level(self, level: int) -> "GameConfig":
        return replace(self, level=level)

    def switched(self) -> "GameConfig":
        return replace(self, opening_player=self.opening_player.opposite)


def _as_int(value: object, name: str) -> int:
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise InvalidConfigurationError(f"{name} must be an integer.")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidConfigurationError(f"{name} must be an integer.") from exc


def normalize_workers(value: object) -> int:
    workers = _as_int(value, "search_workers")
    if workers < 1:
        raise InvalidConfigurationError("search_workers must be at least 1.")
    return workers


def normalize_pits(value: object) -> int:
    pits = _as_int(value, "pits_per_player")
    if pits < 1:
        raise InvalidConfigurationError("pits_per_player must be at least 1.")
    return pits


def normalize_seeds(value: object) -> int:
    seeds = _as_int(value, "seeds_per_pit")
    if seeds < 0:
        raise InvalidConfigurationError("seeds_per_pit must be non-negative.")
    return seeds


def normalize_level(value: object) -> int:
    level = _as_int(value, "level")
    if level < 1:
        raise InvalidConfigurationError("Level must be greater than 0.")
    return level


def normalize_player(value: object) -> Player:
    if isinstance(value, Player):
        return value
    name = str(value).strip().lower()
    if name in ("human", "h"):
        return Player.HUMAN
    if name in ("computer", "machine", "c", "m"):
        return Player.COMPUTER
    raise InvalidConfigurationError(f"Unsupported opening player '{value}'.")


def merge_config(current: GameConfig, payload: Optional[Mapping]) -> GameConfig:
    if not payload:
        return current

    changes = {}
    if "pits_per_player" in payload:
        changes["pits_per_player"] = normalize_pits(payload["pits_per_player"])
    if "seeds_per_pit" in payload:
        changes["seeds_per_pit"] = normalize_seeds(payload["seeds_per_pit"])
    if "opening_player" in payload:
        changes["opening_player"] = normalize_player(payload["opening_player"])
    if "level" in payload:
        changes["level"] = normalize_level(payload["level"])
    if "search_workers" in payload:
        changes["search_workers"] = normalize_workers(payload["search_workers"])

    unknown = set(payload) - {"pits_per_player", "seeds_per_pit", "opening_player", "level", "search_workers"}
    if unknown:
        raise InvalidConfigurationError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
    return replace(current, **changes)


def load_config(path: Union[str, Path], base: Optional[GameConfig] = None) -> GameConfig:
    cfg_path = Path(path)
    data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, Mapping):
        raise InvalidConfigurationError(f"{cfg_path} must contain a mapping.")
    return merge_config(base or GameConfig(), data)
