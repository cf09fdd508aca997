"""
Score-entry operations on a round.

Every operation mutates the round in place and then rebuilds the derived results
for the game it touched. Unknown teams, holes, slots or players raise ValueError.
"""

from __future__ import annotations

from typing import Optional

from models.course import Course
from models.hole_score import HoleScore
from models.round import RoundData
from models.scramble import TEAM_SLOTS, ScrambleTeam

from . import closest_to_pin
from .scramble import recompute_scramble
from .skins import recompute_skins

DEFAULT_TEAM_COUNT = 5
SCRAMBLE_ROUND_PAR = 72
DEFAULT_HOLE_PAR = 4


# ================================================================
# Skins
# ================================================================

def record_skins_score(
    round_data: RoundData,
    course: Course,
    player_id: str,
    hole: int,
    score: int,
) -> None:
    """Set a player's gross score on a hole. A score of 0 or less removes it."""
    game = round_data.skins_game
    if game.get_player(player_id) is None:
        raise ValueError(f"Player {player_id} is not in the skins game")

    remaining = [s for s in game.scores.get(player_id, []) if s.hole != hole]
    if score > 0:
        course_hole = course.get_hole(hole)
        par = course_hole.par if course_hole else DEFAULT_HOLE_PAR
        remaining.append(HoleScore(hole=hole, score=score, par=par))

    game.scores = {**game.scores, player_id: sorted(remaining, key=lambda s: s.hole)}
    recompute_skins(game, course)


# ================================================================
# Scramble
# ================================================================

def ensure_scramble_teams(
    round_data: RoundData,
    team_count: int = DEFAULT_TEAM_COUNT,
    slots: int = TEAM_SLOTS,
) -> bool:
    """Reset the team layout when it is not ``team_count`` teams of ``slots`` slots.

    Returns True when the teams were reset.
    """
    game = round_data.scramble_game
    if len(game.teams) == team_count and all(len(t.players) == slots for t in game.teams):
        return False

    game.teams = [
        ScrambleTeam(id=f"team-{i}", name="", players=[None] * slots)
        for i in range(1, team_count + 1)
    ]
    game.scores = {}
    recompute_scramble(game)
    return True


def _require_team(round_data: RoundData, team_id: str) -> ScrambleTeam:
    team = round_data.scramble_game.get_team(team_id)
    if team is None:
        raise ValueError(f"Team {team_id} not found")
    return team


def _on_round_roster(round_data: RoundData, player_id: str) -> bool:
    return (
        round_data.skins_game.get_player(player_id) is not None
        or round_data.closest_to_pin_game.has_player(player_id)
    )


def set_team_player(
    round_data: RoundData,
    team_id: str,
    slot: int,
    player_id: Optional[str],
) -> None:
    """Seat a player in a team slot, or empty the slot with ``None``."""
    game = round_data.scramble_game
    team = _require_team(round_data, team_id)
    if not 0 <= slot < len(team.players):
        raise ValueError(f"Slot {slot} out of range for {team_id}")

    if player_id is not None:
        if not _on_round_roster(round_data, player_id):
            raise ValueError(f"Player {player_id} is not on the round roster")
        current = game.team_for_player(player_id)
        if current is not None and not (current.id == team_id and team.players[slot] == player_id):
            raise ValueError(f"Player {player_id} is already on {current.id}")

    players = list(team.players)
    players[slot] = player_id
    team.players = players
    recompute_scramble(game)


def set_team_name(round_data: RoundData, team_id: str, name: str) -> None:
    _require_team(round_data, team_id).name = name


def set_team_total_score(round_data: RoundData, team_id: str, total_score: int) -> None:
    """Record a team's round total as a single hole-1 entry. 0 or less clears it."""
    game = round_data.scramble_game
    _require_team(round_data, team_id)

    entries = []
    if total_score > 0:
        entries = [HoleScore(hole=1, score=total_score, par=SCRAMBLE_ROUND_PAR)]
    game.scores = {**game.scores, team_id: entries}
    recompute_scramble(game)


# ================================================================
# Closest to pin
# ================================================================

def set_ctp_winner(
    round_data: RoundData,
    hole: int,
    player_id: str,
    distance: Optional[str] = None,
) -> None:
    closest_to_pin.assign_winner(round_data.closest_to_pin_game, hole, player_id, distance)


def clear_ctp_winner(round_data: RoundData, hole: int) -> None:
    closest_to_pin.clear_winner(round_data.closest_to_pin_game, hole)


def recompute_round(round_data: RoundData, course: Course) -> None:
    """Rebuild every derived result on a round."""
    recompute_skins(round_data.skins_game, course)
    recompute_scramble(round_data.scramble_game)
