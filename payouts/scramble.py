"""Scramble: rank team totals and split the first/second place pots."""

from __future__ import annotations

import math
from pydantic import Field
from typing import Any, Dict, List, Optional

from models.base import BaseGolfModel
from models.scramble import ScrambleGame, ScrambleScore


class TeamPayout(BaseGolfModel):
    """What one team takes from the scramble pots."""
    team_id: str
    total_score: int = 0
    rank: Optional[int] = None        # None until the team posts a score
    position: Optional[int] = None    # 1 or 2 when the team is paid
    tied_teams: int = 0
    team_payout: float = 0.0
    player_count: int = 0
    per_player: Optional[float] = None  # None when no one is seated on the team


def calculate_team_results(game: ScrambleGame) -> List[ScrambleScore]:
    """
    Sum each team's scores and sort lowest first.

    Teams without a score sort to the end. Equal totals keep team order.
    """
    results = []
    for team in game.teams:
        team_scores = list(game.scores.get(team.id, []))
        results.append(
            ScrambleScore(
                team_id=team.id,
                scores=team_scores,
                total_score=sum(s.score for s in team_scores),
            )
        )

    results.sort(key=lambda r: (r.total_score == 0, r.total_score))
    return results


def recompute_scramble(game: ScrambleGame) -> List[ScrambleScore]:
    """Replace the game's derived results."""
    game.results = calculate_team_results(game)
    return game.results


def _ranked(results: List[ScrambleScore]) -> List[ScrambleScore]:
    return [r for r in results if r.total_score > 0]


def calculate_scramble_payouts(game: ScrambleGame) -> List[TeamPayout]:
    """
    Pay the scramble pots for a round, in finishing order.

    - A lone winner takes ``first_place_pot``; the next-lowest score (shared
      evenly if tied) takes ``second_place_pot``.
    - A tie for first splits both pots across the tied teams and no second
      place is paid.
    - Each team's share is divided across its seated players.
    """
    results = calculate_team_results(game)
    ranked = _ranked(results)
    shares: Dict[str, float] = {}
    positions: Dict[str, tuple] = {}

    if ranked:
        first_score = ranked[0].total_score
        first_teams = [r.team_id for r in ranked if r.total_score == first_score]

        if len(first_teams) == 1:
            shares[first_teams[0]] = game.first_place_pot
            positions[first_teams[0]] = (1, 1)

            behind = [r for r in ranked if r.total_score > first_score]
            if behind:
                second_score = behind[0].total_score
                second_teams = [r.team_id for r in behind if r.total_score == second_score]
                for team_id in second_teams:
                    shares[team_id] = game.second_place_pot / len(second_teams)
                    positions[team_id] = (2, len(second_teams))
        else:
            for team_id in first_teams:
                shares[team_id] = game.combined_pot / len(first_teams)
                positions[team_id] = (1, len(first_teams))

    rank_by_team = {r.team_id: index for index, r in enumerate(ranked, start=1)}
    payouts: List[TeamPayout] = []
    for result in results:
        team = game.get_team(result.team_id)
        player_count = team.player_count if team else 0
        team_payout = shares.get(result.team_id, 0.0)
        position, tied = positions.get(result.team_id, (None, 0))
        payouts.append(
            TeamPayout(
                team_id=result.team_id,
                total_score=result.total_score,
                rank=rank_by_team.get(result.team_id),
                position=position,
                tied_teams=tied,
                team_payout=team_payout,
                player_count=player_count,
                per_player=team_payout / player_count if player_count else None,
            )
        )
    return payouts


def player_scramble_winnings(player_id: str, game: ScrambleGame) -> int:
    """
    Whole-unit payout credited to a player.

    Shares are floored when credited, so an uneven split can leave a few cents
    of the pot undistributed.
    """
    team = game.team_for_player(player_id)
    if team is None:
        return 0

    for payout in calculate_scramble_payouts(game):
        if payout.team_id == team.id:
            return math.floor(payout.per_player) if payout.per_player else 0
    return 0


def completed_teams(game: ScrambleGame) -> List[Dict[str, Any]]:
    """Teams that have posted a score, with their rank, for standings views."""
    rows: List[Dict[str, Any]] = []
    for rank, result in enumerate(_ranked(calculate_team_results(game)), start=1):
        rows.append(
            {
                "team": game.get_team(result.team_id),
                "result": result,
                "rank": rank,
            }
        )
    return rows
