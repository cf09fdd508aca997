"""Closest-to-pin: a manually recorded winner per designated hole, fixed prize each."""

from __future__ import annotations

from typing import Optional

from models.closest_to_pin import ClosestToPinGame, ClosestToPinHole


def _require_hole(game: ClosestToPinGame, hole: int) -> ClosestToPinHole:
    ctp_hole = game.get_hole(hole)
    if ctp_hole is None:
        raise ValueError(f"Hole {hole} is not a closest-to-pin hole")
    return ctp_hole


def assign_winner(
    game: ClosestToPinGame,
    hole: int,
    player_id: str,
    distance: Optional[str] = None,
) -> ClosestToPinHole:
    """Record the winner of one hole. Any previous distance is replaced."""
    ctp_hole = _require_hole(game, hole)
    if not ctp_hole.is_active:
        raise ValueError(f"Hole {hole} is not active for closest-to-pin")
    if not game.has_player(player_id):
        raise ValueError(f"Player {player_id} is not in the closest-to-pin game")

    ctp_hole.winner = player_id
    ctp_hole.distance = distance
    return ctp_hole


def clear_winner(game: ClosestToPinGame, hole: int) -> ClosestToPinHole:
    """Remove the winner and the recorded distance."""
    ctp_hole = _require_hole(game, hole)
    ctp_hole.winner = None
    ctp_hole.distance = None
    return ctp_hole


def player_ctp_winnings(player_id: str, game: ClosestToPinGame) -> float:
    return sum(h.prize for h in game.holes if h.is_active and h.winner == player_id)


def total_awarded(game: ClosestToPinGame) -> float:
    return sum(h.prize for h in game.holes if h.is_active and h.winner is not None)


def remaining_prize(game: ClosestToPinGame) -> float:
    return game.total_prize_pool - total_awarded(game)
