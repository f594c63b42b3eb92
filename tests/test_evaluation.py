import numpy as np

from kalah import GameConfig, Kalah, Player
from kalah.evaluation import RandomPolicy, SearchPolicy, evaluate_policies, play_game


def test_evaluate_random_vs_random_small():
    policy_a = RandomPolicy(np.random.default_rng(0))
    policy_b = RandomPolicy(np.random.default_rng(1))
    result = evaluate_policies(policy_a, policy_b, episodes=2, config=GameConfig(pits_per_player=4, seeds_per_pit=3))
    assert result.games_played == 2
    assert result.human_wins + result.computer_wins + result.ties == 2
    assert result.average_length > 0


def test_search_policy_returns_global_pit_for_computer():
    session = Kalah(GameConfig(opening_player=Player.COMPUTER))
    pit = SearchPolicy(level=2).choose_pit(session)
    assert pit in session.legal_pits()


def test_play_game_with_search_on_both_sides_is_reproducible():
    config = GameConfig(pits_per_player=4, seeds_per_pit=3)
    first = play_game(SearchPolicy(1), SearchPolicy(2), config)
    second = play_game(SearchPolicy(1), SearchPolicy(2), config)
    assert first == second
