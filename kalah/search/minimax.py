"""Deterministic alpha-beta minimax over Kalah boards."""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from math import inf
from typing import Dict, List, Optional, Tuple

from kalah.core import (
    Board,
    InvalidConfigurationError,
    InvariantViolationError,
    Player,
    apply_move,
    is_game_over,
    legal_pits,
    score_difference,
)

logger = logging.getLogger(__name__)

MIN_LEVEL = 1


def depth_for_level(level: int) -> int:
    """Plies searched for a difficulty level. Level 1 already sees one reply."""
    if level < MIN_LEVEL:
        raise InvalidConfigurationError(f"Level must be at least {MIN_LEVEL}.")
    return level + 1


@dataclass(frozen=True)
class SearchConfig:
    level: int = 3
    workers: int = 1

    @property
    def depth(self) -> int:
        return depth_for_level(self.level)


@dataclass(frozen=True)
class SearchResult:
    pit: int
    score: float
    nodes: int
    elapsed_ms: float
    depth: int

    def as_dict(self) -> Dict[str, object]:
        return {
            "pit": self.pit,
            "score": self.score,
            "nodes": self.nodes,
            "elapsed_ms": round(self.elapsed_ms, 3),
            "depth": self.depth,
        }


def _successor(board: Board, player: Player, pit: int) -> Tuple[Board, Player]:
    child, record = apply_move(board, player, pit)
    return child, player if record.extra_turn else player.opposite


def _minimax(
    board: Board,
    to_move: Player,
    root_player: Player,
    depth: int,
    alpha: float,
    beta: float,
    stats: Dict[str, int],
) -> float:
    stats["nodes"] += 1

    # Finished boards are already swept, so the store difference is final.
    if depth == 0 or is_game_over(board):
        return score_difference(board, root_player)

    maximizing = to_move is root_player

    if maximizing:
        best_value = -inf
        for pit in legal_pits(board, to_move):
            child, next_player = _successor(board, to_move, pit)
            value = _minimax(child, next_player, root_player, depth - 1, alpha, beta, stats)
            best_value = max(best_value, value)
            alpha = max(alpha, best_value)
            if beta <= alpha:
                break
        return best_value

    best_value = inf
    for pit in legal_pits(board, to_move):
        child, next_player = _successor(board, to_move, pit)
        value = _minimax(child, next_player, root_player, depth - 1, alpha, beta, stats)
        best_value = min(best_value, value)
        beta = min(beta, best_value)
        if beta <= alpha:
            break
    return best_value


def _score_root_pit(board: Board, player: Player, pit: int, depth: int) -> Tuple[float, int]:
    stats = {"nodes": 0}
    child, next_player = _successor(board, player, pit)
    value = _minimax(child, next_player, player, depth - 1, -inf, inf, stats)
    return value, stats["nodes"]


def _search_sequential(board: Board, player: Player, pits: List[int], depth: int) -> Tuple[int, float, int]:
    stats = {"nodes": 1}
    best_pit = pits[0]
    best_value = -inf
    for pit in pits:
        child, next_player = _successor(board, player, pit)
        value = _minimax(child, next_player, player, depth - 1, best_value, inf, stats)
        # Strict comparison keeps the lowest pit on ties.
        if value > best_value:
            best_value = value
            best_pit = pit
    return best_pit, best_value, stats["nodes"]


def _search_parallel(
    board: Board, player: Player, pits: List[int], depth: int, workers: int
) -> Tuple[int, float, int]:
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(_score_root_pit, board, player, pit, depth) for pit in pits]
        scored = [future.result() for future in futures]

    best_pit = pits[0]
    best_value = -inf
    nodes = 1
    for pit, (value, child_nodes) in zip(pits, scored):
        nodes += child_nodes
        if value > best_value:
            best_value = value
            best_pit = pit
    return best_pit, best_value, nodes


def search_best_pit(board: Board, player: Player, config: Optional[SearchConfig] = None) -> SearchResult:
    resolved = config or SearchConfig()
    depth = resolved.depth
    pits = legal_pits(board, player)
    if not pits:
        raise InvariantViolationError(f"search invoked for {player.value} without a legal move")

    start = time.perf_counter()
    if resolved.workers > 1 and len(pits) > 1:
        pit, score, nodes = _search_parallel(board, player, pits, depth, resolved.workers)
    else:
        pit, score, nodes = _search_sequential(board, player, pits, depth)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    logger.debug(
        "search chose pit %d for %s (score=%s, nodes=%d, depth=%d, %.1f ms)",
        pit,
        player.value,
        score,
        nodes,
        depth,
        elapsed_ms,
    )
    return SearchResult(pit=pit, score=score, nodes=nodes, elapsed_ms=elapsed_ms, depth=depth)
