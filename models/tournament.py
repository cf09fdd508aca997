from pydantic import Field
from typing import Dict, List, Optional

from .base import BaseGolfModel
from .course import Course, tribute_course
from .player import Player
from .round import RoundData


class TournamentData(BaseGolfModel):
    """The whole trip: every round plus the course they are played on."""
    rounds: List[RoundData] = Field(default_factory=list)
    course: Course = Field(default_factory=tribute_course)
    total_winnings: Dict[str, float] = Field(default_factory=dict)

    def get_round(self, round_id: str) -> Optional[RoundData]:
        for round_data in self.rounds:
            if round_data.id == round_id:
                return round_data
        return None

    def all_players(self) -> List[Player]:
        """Every player on any skins or closest-to-pin roster, in first-seen order."""
        players: Dict[str, Player] = {}
        for round_data in self.rounds:
            for player in round_data.skins_game.players + round_data.closest_to_pin_game.players:
                players.setdefault(player.id, player)
        return list(players.values())
