"""Skins: lowest unique net score takes the hole, the pot is split over holes won."""

from __future__ import annotations

from pydantic import Field
from typing import Iterable, List

from models.base import BaseGolfModel
from models.course import Course
from models.hole_score import SkinScore
from models.skins_game import SkinsGame

from .strokes import net_score_for_hole


class SkinsOutcome(BaseGolfModel):
    """Skin results for a round plus the pot split they imply."""
    results: List[SkinScore] = Field(default_factory=list)
    skins_won: int = 0
    pot_per_skin: float = 0.0


def calculate_skins(game: SkinsGame, course: Course) -> SkinsOutcome:
    """
    Compute skins for a round from scratch.

    A hole is reported when at least one roster player has a played score on it.
    Ties on the best net score leave the hole without a winner. The pot is only
    divided once every hole is settled, since each tie changes the divisor.
    """
    hole_count = course.hole_count
    results: List[SkinScore] = []

    for hole in sorted(course.holes, key=lambda h: h.number):
        entries = []
        for player in game.players:
            score = game.get_score(player.id, hole.number)
            if score is None or not score.is_played():
                continue
            entries.append((player.id, net_score_for_hole(score.score, player.group, hole, hole_count)))

        if not entries:
            continue

        best = min(net for _, net in entries)
        winners = [player_id for player_id, net in entries if net == best]
        results.append(
            SkinScore(
                hole=hole.number,
                score=best,
                par=hole.par,
                net_score=best,
                winner=winners[0] if len(winners) == 1 else None,
            )
        )

    skins_won = sum(1 for r in results if r.winner is not None)
    pot_per_skin = game.total_pot / skins_won if skins_won else 0.0
    for result in results:
        if result.winner is not None:
            result.pot = pot_per_skin

    return SkinsOutcome(results=results, skins_won=skins_won, pot_per_skin=pot_per_skin)


def recompute_skins(game: SkinsGame, course: Course) -> SkinsOutcome:
    """Replace the game's derived skin results and pot-per-hole."""
    outcome = calculate_skins(game, course)
    game.skin_results = outcome.results
    game.pot_per_hole = outcome.pot_per_skin
    return outcome


def player_skins_winnings(player_id: str, results: Iterable[SkinScore]) -> float:
    return sum(r.pot for r in results if r.winner == player_id)
