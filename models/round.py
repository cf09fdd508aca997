from pydantic import Field

from .base import BaseGolfModel
from .closest_to_pin import ClosestToPinGame
from .scramble import ScrambleGame
from .skins_game import SkinsGame


class RoundData(BaseGolfModel):
    """One calendar round of the trip and its three games."""
    id: str
    name: str = ""
    day: str = ""
    # Headline figure for display only; payouts come from each game's own pots.
    prize_pool: float = Field(0, ge=0)
    skins_game: SkinsGame = Field(default_factory=SkinsGame)
    closest_to_pin_game: ClosestToPinGame = Field(default_factory=ClosestToPinGame)
    scramble_game: ScrambleGame = Field(default_factory=ScrambleGame)
