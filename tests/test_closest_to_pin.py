import pytest

from payouts.closest_to_pin import (
    assign_winner,
    clear_winner,
    player_ctp_winnings,
    remaining_prize,
    total_awarded,
)
from storage.seed import empty_round


@pytest.fixture
def game():
    return empty_round("thursday", "Thursday - Payout", "Thursday").closest_to_pin_game


def test_assign_winner_pays_hole_prize(game):
    assign_winner(game, 6, "12", distance="4 ft 2 in")

    hole = game.get_hole(6)
    assert hole.winner == "12"
    assert hole.distance == "4 ft 2 in"
    assert player_ctp_winnings("12", game) == 62.5
    assert player_ctp_winnings("1", game) == 0


def test_winnings_are_count_times_prize(game):
    assign_winner(game, 6, "3")
    assign_winner(game, 13, "3")
    assign_winner(game, 17, "7")

    assert player_ctp_winnings("3", game) == 125
    assert total_awarded(game) == 187.5
    assert remaining_prize(game) == 62.5


def test_reassign_replaces_winner_and_distance(game):
    assign_winner(game, 9, "1", distance="10 ft")
    assign_winner(game, 9, "2")

    assert game.get_hole(9).winner == "2"
    assert game.get_hole(9).distance is None
    assert player_ctp_winnings("1", game) == 0


def test_clear_winner_removes_payout_and_distance(game):
    assign_winner(game, 6, "12", distance="3 ft")
    clear_winner(game, 6)

    hole = game.get_hole(6)
    assert hole.winner is None
    assert hole.distance is None
    assert all(player_ctp_winnings(p.id, game) == 0 for p in game.players)
    assert remaining_prize(game) == 250


def test_assign_rejects_unknown_hole_inactive_hole_and_player(game):
    with pytest.raises(ValueError):
        assign_winner(game, 5, "1")          # not a designated hole

    game.get_hole(17).is_active = False
    with pytest.raises(ValueError):
        assign_winner(game, 17, "1")

    with pytest.raises(ValueError):
        assign_winner(game, 6, "99")         # not on the roster

    with pytest.raises(ValueError):
        clear_winner(game, 5)


def test_inactive_hole_pays_nothing(game):
    assign_winner(game, 13, "4")
    game.get_hole(13).is_active = False
    assert player_ctp_winnings("4", game) == 0
