from pydantic import Field
from typing import Optional

from .base import BaseGolfModel


class HoleScore(BaseGolfModel):
    """A gross score on one hole.

    Scramble stores a single synthetic hole-1 entry whose score is the round total,
    so the upper bound on ``score`` is left open.
    """
    hole: int = Field(..., ge=1)
    score: int = Field(0, ge=0)
    par: int = Field(4, ge=3)

    def is_played(self) -> bool:
        """A score of 0 means the hole has not been played yet."""
        return self.score > 0

    def to_par(self) -> Optional[int]:
        """Calculate score relative to par (+2, -1, etc.)."""
        if not self.is_played():
            return None
        return self.score - self.par


class SkinScore(HoleScore):
    """Derived result for one hole of the skins game. ``score`` mirrors the best net score."""
    score: int = 0
    net_score: int
    winner: Optional[str] = None  # player id, None when tied
    pot: float = 0.0
