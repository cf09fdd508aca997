from pydantic import Field
from typing import Dict, List, Optional

from .base import BaseGolfModel
from .hole_score import HoleScore, SkinScore
from .player import Player


class SkinsGame(BaseGolfModel):
    """Per-round skins game. ``skin_results`` and ``pot_per_hole`` are derived."""
    players: List[Player] = Field(default_factory=list)
    scores: Dict[str, List[HoleScore]] = Field(default_factory=dict)
    skin_results: List[SkinScore] = Field(default_factory=list)
    pot_per_hole: float = Field(0, ge=0)
    total_pot: float = Field(0, ge=0)

    def get_player(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def get_score(self, player_id: str, hole: int) -> Optional[HoleScore]:
        """Get a player's recorded score on a hole, if any."""
        for score in self.scores.get(player_id, []):
            if score.hole == hole:
                return score
        return None
