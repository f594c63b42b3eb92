import numpy as np
import pytest

from kalah.core import (
    Board,
    IllegalMoveError,
    Outcome,
    Player,
    apply_move,
    initial_board,
    is_game_over,
    legal_pits,
    outcome,
)


def board(human, computer, human_store=0, computer_store=0) -> Board:
    return Board.from_pits(human, computer, human_store=human_store, computer_store=computer_store)


def test_initial_board_layout() -> None:
    start = initial_board(6, 4)

    assert start.pits_per_player == 6
    assert start.total_seeds() == 48
    assert list(start.pits(Player.HUMAN)) == [4] * 6
    assert list(start.pits(Player.COMPUTER)) == [4] * 6
    assert start.store(Player.HUMAN) == 0
    assert start.store(Player.COMPUTER) == 0


def test_board_cells_are_read_only() -> None:
    start = initial_board(3, 3)
    with pytest.raises(ValueError):
        start.cells[0] = 7


def test_sowing_into_own_store_grants_extra_turn() -> None:
    start = initial_board(6, 4)

    after, record = apply_move(start, Player.HUMAN, 3)

    assert list(after.pits(Player.HUMAN)) == [4, 4, 0, 5, 5, 5]
    assert after.store(Player.HUMAN) == 1
    assert list(after.pits(Player.COMPUTER)) == [4] * 6
    assert record.extra_turn
    assert record.source_pit == 3
    assert record.target_pit is None
    # the original board is untouched
    assert list(start.pits(Player.HUMAN)) == [4] * 6


def test_capture_takes_landing_seed_and_opposite_pit() -> None:
    start = board([1, 0, 0, 0, 0, 2], [1, 1, 1, 1, 3, 1])

    after, record = apply_move(start, Player.HUMAN, 1)

    # human pit 2 faces computer pit 5
    assert record.captured == 4
    assert after.store(Player.HUMAN) == 4
    assert list(after.pits(Player.HUMAN)) == [0, 0, 0, 0, 0, 2]
    assert list(after.pits(Player.COMPUTER)) == [1, 1, 1, 1, 0, 1]
    assert not record.extra_turn
    assert record.target_pit == 2


def test_capture_with_empty_opposite_pit_takes_single_seed() -> None:
    start = board([1, 0, 0, 0, 0, 2], [1, 1, 1, 1, 0, 1])

    after, record = apply_move(start, Player.HUMAN, 1)

    assert record.captured == 1
    assert after.store(Player.HUMAN) == 1
    assert after.seeds(Player.HUMAN, 2) == 0


def test_no_capture_when_landing_pit_was_occupied() -> None:
    start = board([1, 2, 0], [1, 1, 1])

    after, record = apply_move(start, Player.HUMAN, 1)

    assert record.captured == 0
    assert list(after.pits(Player.HUMAN)) == [0, 3, 0]
    assert after.store(Player.HUMAN) == 0


def test_no_capture_on_opponent_side() -> None:
    start = board([1, 0, 0, 0, 0, 2], [0, 1, 1, 1, 1, 1])

    after, record = apply_move(start, Player.HUMAN, 6)

    assert record.captured == 0
    assert after.store(Player.HUMAN) == 1
    assert after.seeds(Player.COMPUTER, 1) == 1
    assert record.target_pit == 7


def test_computer_capture_uses_mirrored_pit() -> None:
    start = board([9, 1, 1], [3, 1, 0])

    after, record = apply_move(start, Player.COMPUTER, 2)

    # computer pit 3 faces human pit 1
    assert record.captured == 10
    assert after.store(Player.COMPUTER) == 10
    assert list(after.pits(Player.HUMAN)) == [0, 1, 1]
    assert list(after.pits(Player.COMPUTER)) == [3, 0, 0]


def test_sowing_skips_opponent_store() -> None:
    start = board([1, 1, 1], [0, 0, 10])

    after, record = apply_move(start, Player.COMPUTER, 3)

    assert after.store(Player.HUMAN) == 0
    assert after.store(Player.COMPUTER) == 2
    assert list(after.pits(Player.HUMAN)) == [3, 3, 3]
    assert list(after.pits(Player.COMPUTER)) == [1, 1, 0]
    assert after.total_seeds() == start.total_seeds()
    assert record.target_pit == 3


def test_lap_skips_emptied_source_pit() -> None:
    start = board([6, 1], [1, 1])

    after, record = apply_move(start, Player.HUMAN, 1)

    assert after.seeds(Player.HUMAN, 1) == 0
    assert list(after.pits(Player.HUMAN)) == [0, 3]
    assert after.store(Player.HUMAN) == 2
    assert list(after.pits(Player.COMPUTER)) == [2, 2]
    assert after.store(Player.COMPUTER) == 0
    assert record.extra_turn
    assert record.target_pit is None


def test_computer_extra_turn() -> None:
    start = board([1, 1, 1], [0, 2, 1])

    _, record = apply_move(start, Player.COMPUTER, 2)

    assert record.extra_turn
    assert record.source_pit == 5


def test_termination_sweeps_remaining_seeds_to_owner() -> None:
    start = board([0, 0, 1], [2, 3, 4], human_store=5, computer_store=1)

    after, record = apply_move(start, Player.HUMAN, 3)

    assert record.game_over
    assert not record.extra_turn
    assert is_game_over(after)
    assert after.store(Player.HUMAN) == 6
    assert after.store(Player.COMPUTER) == 10
    assert not after.cells[:3].any()
    assert outcome(after) is Outcome.COMPUTER


@pytest.mark.parametrize("seeds", [1, 2, 3, 4, 5, 9, 25])
@pytest.mark.parametrize("player", list(Player))
def test_single_pit_game_ends_on_first_move(seeds: int, player: Player) -> None:
    start = initial_board(1, seeds)

    after, record = apply_move(start, player, 1)

    assert record.game_over
    assert not record.extra_turn
    assert is_game_over(after)
    assert after.seeds(Player.HUMAN, 1) == 0
    assert after.seeds(Player.COMPUTER, 1) == 0
    assert after.total_seeds() == 2 * seeds
    # the mover's store gets every other seed, the rest is swept to the opponent
    assert after.store(player) == (seeds + 1) // 2
    assert after.store(player.opposite) == seeds + seeds // 2


def test_outcome_tie_on_equal_stores() -> None:
    finished = board([0, 0], [0, 0], human_store=4, computer_store=4)
    assert outcome(finished) is Outcome.TIE


@pytest.mark.parametrize("pit", [0, 7, -1])
def test_pit_out_of_range_is_illegal(pit: int) -> None:
    start = initial_board(6, 4)
    with pytest.raises(IllegalMoveError):
        apply_move(start, Player.HUMAN, pit)


def test_empty_pit_is_illegal_and_board_unchanged() -> None:
    start = board([0, 1, 1], [1, 1, 1])
    before = start.as_tuple()

    with pytest.raises(IllegalMoveError) as excinfo:
        apply_move(start, Player.HUMAN, 1)

    assert "empty" in excinfo.value.reason
    assert start.as_tuple() == before


def test_move_after_game_over_is_illegal() -> None:
    finished = board([0, 0], [1, 1])
    with pytest.raises(IllegalMoveError):
        apply_move(finished, Player.COMPUTER, 1)


def test_legal_pits_lists_non_empty_pits() -> None:
    start = board([0, 2, 0, 1], [1, 0, 0, 0])
    assert legal_pits(start, Player.HUMAN) == [2, 4]
    assert legal_pits(start, Player.COMPUTER) == [1]


@pytest.mark.parametrize("pits,seeds,seed", [(6, 4, 0), (4, 3, 1), (3, 7, 2), (2, 1, 3)])
def test_seed_conservation_over_random_games(pits: int, seeds: int, seed: int) -> None:
    rng = np.random.default_rng(seed)
    current = initial_board(pits, seeds)
    player = Player.HUMAN
    total = current.total_seeds()

    while not is_game_over(current):
        pit = int(rng.choice(legal_pits(current, player)))
        stores_before = {p: current.store(p) for p in Player}
        current, record = apply_move(current, player, pit)
        assert current.total_seeds() == total
        assert current.store(player.opposite) == stores_before[player.opposite] or record.game_over
        player = player if record.extra_turn else player.opposite

    assert current.store(Player.HUMAN) + current.store(Player.COMPUTER) == total
