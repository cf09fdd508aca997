from pydantic import Field
from typing import List, Optional

from .base import BaseGolfModel
from .player import Player


class ClosestToPinHole(BaseGolfModel):
    """A designated par 3 with a manually recorded winner."""
    hole: int = Field(..., ge=1)
    par: int = Field(3, ge=3, le=6)
    is_active: bool = True
    winner: Optional[str] = None  # player id
    distance: Optional[str] = None  # free text, e.g. "4 ft 2 in"
    prize: float = Field(0, ge=0)


class ClosestToPinGame(BaseGolfModel):
    """Per-round closest-to-pin contest."""
    players: List[Player] = Field(default_factory=list)
    holes: List[ClosestToPinHole] = Field(default_factory=list)
    total_prize_pool: float = Field(0, ge=0)

    def get_hole(self, hole: int) -> Optional[ClosestToPinHole]:
        for ctp_hole in self.holes:
            if ctp_hole.hole == hole:
                return ctp_hole
        return None

    def has_player(self, player_id: str) -> bool:
        return any(p.id == player_id for p in self.players)
