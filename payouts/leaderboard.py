"""Per-player winnings across the three games, for one round or the whole trip."""

from __future__ import annotations

from pydantic import Field
from typing import Any, Dict, List, Optional

from models.base import BaseGolfModel
from models.course import Course
from models.player import Group
from models.round import RoundData
from models.tournament import TournamentData

from .closest_to_pin import player_ctp_winnings
from .scramble import player_scramble_winnings
from .skins import calculate_skins, player_skins_winnings

TOTAL_SCOPE = "total"


class WinningsBreakdown(BaseGolfModel):
    """A player's winnings split by game."""
    skins: float = 0.0
    closest_to_pin: float = 0.0
    scramble: float = 0.0

    @property
    def total(self) -> float:
        return self.skins + self.closest_to_pin + self.scramble

    def __add__(self, other: "WinningsBreakdown") -> "WinningsBreakdown":
        return WinningsBreakdown(
            skins=self.skins + other.skins,
            closest_to_pin=self.closest_to_pin + other.closest_to_pin,
            scramble=self.scramble + other.scramble,
        )


class LeaderboardEntry(BaseGolfModel):
    player_id: str
    name: str
    group: Group
    breakdown: WinningsBreakdown = Field(default_factory=WinningsBreakdown)
    total: float = 0.0


class Leaderboard(BaseGolfModel):
    """Ranked winnings for a scope, with the configured headline prize pool."""
    scope: str
    title: str
    prize_pool: float = 0.0
    entries: List[LeaderboardEntry] = Field(default_factory=list)


def round_winnings(player_id: str, round_data: RoundData, course: Course) -> WinningsBreakdown:
    """
    Winnings for one player in one round.

    Skins are recomputed from the recorded scores rather than read from the stored
    results, so a stale blob cannot skew the leaderboard.
    """
    skins = calculate_skins(round_data.skins_game, course)
    return WinningsBreakdown(
        skins=player_skins_winnings(player_id, skins.results),
        closest_to_pin=player_ctp_winnings(player_id, round_data.closest_to_pin_game),
        scramble=player_scramble_winnings(player_id, round_data.scramble_game),
    )


def _rounds_in_scope(tournament: TournamentData, scope: str) -> Optional[List[RoundData]]:
    if scope == TOTAL_SCOPE:
        return list(tournament.rounds)
    round_data = tournament.get_round(scope)
    return [round_data] if round_data else None


def build_leaderboard(tournament: TournamentData, scope: str = TOTAL_SCOPE) -> Optional[Leaderboard]:
    """
    Rank every player who appears on any roster by winnings in ``scope``.

    ``scope`` is ``"total"`` or a round id; an unknown round id returns None.
    Equal totals keep roster order.
    """
    rounds = _rounds_in_scope(tournament, scope)
    if rounds is None:
        return None

    entries = []
    for player in tournament.all_players():
        breakdown = WinningsBreakdown()
        for round_data in rounds:
            breakdown = breakdown + round_winnings(player.id, round_data, tournament.course)
        entries.append(
            LeaderboardEntry(
                player_id=player.id,
                name=player.name,
                group=player.group,
                breakdown=breakdown,
                total=breakdown.total,
            )
        )
    entries.sort(key=lambda e: e.total, reverse=True)

    if scope == TOTAL_SCOPE:
        title = "Total Tournament Payout"
    else:
        title = f"{rounds[0].day or rounds[0].name or rounds[0].id} Payout"

    return Leaderboard(
        scope=scope,
        title=title,
        prize_pool=sum(r.prize_pool for r in rounds),
        entries=entries,
    )


def total_winnings_by_player(tournament: TournamentData) -> Dict[str, float]:
    """Trip totals keyed by player id, for ``TournamentData.total_winnings``."""
    leaderboard = build_leaderboard(tournament, TOTAL_SCOPE)
    return {entry.player_id: entry.total for entry in leaderboard.entries}


def _money(amount: float) -> str:
    return f"${amount:,.2f}"


def leaderboard_rows(leaderboard: Leaderboard) -> List[Dict[str, Any]]:
    """Flatten a leaderboard into display rows for report/export renderers."""
    rows: List[Dict[str, Any]] = []
    for position, entry in enumerate(leaderboard.entries, start=1):
        rows.append(
            {
                "position": position,
                "player_id": entry.player_id,
                "name": entry.name,
                "group": entry.group,
                "skins": _money(entry.breakdown.skins),
                "closest_to_pin": _money(entry.breakdown.closest_to_pin),
                "scramble": _money(entry.breakdown.scramble),
                "total": _money(entry.total),
            }
        )
    return rows
