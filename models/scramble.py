from pydantic import Field, model_validator
from typing import Dict, List, Optional

from .base import BaseGolfModel
from .hole_score import HoleScore

TEAM_SLOTS = 4


class ScrambleTeam(BaseGolfModel):
    """A scramble team with fixed player slots. ``None`` marks an empty slot."""
    id: str
    name: str = ""
    players: List[Optional[str]] = Field(default_factory=lambda: [None] * TEAM_SLOTS)

    def active_players(self) -> List[str]:
        """Player ids in filled slots, in slot order."""
        return [p for p in self.players if p is not None]

    @property
    def player_count(self) -> int:
        return len(self.active_players())


class ScrambleScore(BaseGolfModel):
    """Derived per-team total for the round."""
    team_id: str
    scores: List[HoleScore] = Field(default_factory=list)
    total_score: int = 0


class ScrambleGame(BaseGolfModel):
    """Per-round scramble. ``results`` is derived from ``teams`` and ``scores``."""
    teams: List[ScrambleTeam] = Field(default_factory=list)
    scores: Dict[str, List[HoleScore]] = Field(default_factory=dict)
    results: List[ScrambleScore] = Field(default_factory=list)
    first_place_pot: float = Field(280, ge=0)
    second_place_pot: float = Field(80, ge=0)

    @model_validator(mode='after')
    def validate_single_team_per_player(self):
        seen: Dict[str, str] = {}
        for team in self.teams:
            for player_id in team.active_players():
                if player_id in seen:
                    raise ValueError(
                        f"Player {player_id} is on both {seen[player_id]} and {team.id}"
                    )
                seen[player_id] = team.id
        return self

    @property
    def combined_pot(self) -> float:
        """Paid out in full when first place is tied."""
        return self.first_place_pot + self.second_place_pot

    def get_team(self, team_id: str) -> Optional[ScrambleTeam]:
        for team in self.teams:
            if team.id == team_id:
                return team
        return None

    def team_for_player(self, player_id: str) -> Optional[ScrambleTeam]:
        for team in self.teams:
            if player_id in team.active_players():
                return team
        return None
