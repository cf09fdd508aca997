from .base import BaseGolfModel
from .closest_to_pin import ClosestToPinGame, ClosestToPinHole
from .course import Course, tribute_course
from .hole import CourseHole
from .hole_score import HoleScore, SkinScore
from .player import Group, Player
from .round import RoundData
from .scramble import ScrambleGame, ScrambleScore, ScrambleTeam
from .skins_game import SkinsGame
from .tournament import TournamentData

__all__ = [
    "BaseGolfModel",
    "ClosestToPinGame",
    "ClosestToPinHole",
    "Course",
    "CourseHole",
    "Group",
    "HoleScore",
    "Player",
    "RoundData",
    "ScrambleGame",
    "ScrambleScore",
    "ScrambleTeam",
    "SkinScore",
    "SkinsGame",
    "TournamentData",
    "tribute_course",
]
