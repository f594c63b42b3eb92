from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Iterable, Optional, Tuple

import numpy as np

from kalah.core import Outcome, Player
from kalah.game import GameConfig, Kalah
from kalah.search import SearchConfig, search_best_pit


@dataclass
class EvaluationResult:
    games_played: int
    human_wins: int
    computer_wins: int
    ties: int
    average_length: float

    def winrate_human(self) -> float:
        return self.human_wins / max(1, self.games_played)

    def winrate_computer(self) -> float:
        return self.computer_wins / max(1, self.games_played)


class Policy:
    """Chooses a pit (global numbering) for the player to move in a session."""

    def choose_pit(self, session: Kalah) -> int:
        raise NotImplementedError


class RandomPolicy(Policy):
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def choose_pit(self, session: Kalah) -> int:
        pits = session.legal_pits()
        return int(self.rng.choice(pits))


class SearchPolicy(Policy):
    """Plays either side with the same search the computer opponent uses."""

    def __init__(self, level: int, workers: int = 1) -> None:
        self.config = SearchConfig(level=level, workers=workers)

    def choose_pit(self, session: Kalah) -> int:
        mover = session.next()
        result = search_best_pit(session.board, mover, self.config)
        offset = 0 if mover is Player.HUMAN else session.get_pits_per_player()
        return result.pit + offset


def play_game(human_policy: Policy, computer_policy: Policy, config: GameConfig) -> Tuple[Outcome, int]:
    session = Kalah(config)
    plies = 0
    while not session.is_game_over():
        policy = human_policy if session.next() is Player.HUMAN else computer_policy
        session = session.move(policy.choose_pit(session))
        plies += 1
    return session.get_winner(), plies


def evaluate_policies(
    human_policy: Policy,
    computer_policy: Policy,
    *,
    episodes: int,
    config: Optional[GameConfig] = None,
    alternate_openings: bool = True,
    iterator_factory: Callable[[int], Iterable[int]] = range,
) -> EvaluationResult:
    base = config or GameConfig()

    human_wins = 0
    computer_wins = 0
    ties = 0
    total_plies = 0

    for episode in iterator_factory(episodes):
        game_config = base
        if alternate_openings and episode % 2 == 1:
            game_config = replace(base, opening_player=base.opening_player.opposite)
        winner, plies = play_game(human_policy, computer_policy, game_config)
        total_plies += plies
        if winner is Outcome.HUMAN:
            human_wins += 1
        elif winner is Outcome.COMPUTER:
            computer_wins += 1
        else:
            ties += 1

    return EvaluationResult(
        games_played=episodes,
        human_wins=human_wins,
        computer_wins=computer_wins,
        ties=ties,
        average_length=total_plies / max(1, episodes),
    )
