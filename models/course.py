from pydantic import Field, model_validator
from typing import List, Optional

from .base import BaseGolfModel
from .hole import CourseHole


class Course(BaseGolfModel):
    """Course layout shared read-only by every game."""
    name: Optional[str] = None
    holes: List[CourseHole] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_unique_holes(self):
        numbers = [h.number for h in self.holes]
        if len(numbers) != len(set(numbers)):
            raise ValueError("Hole numbers must be unique")

        ranks = [h.handicap for h in self.holes if h.handicap is not None]
        if len(ranks) != len(set(ranks)):
            raise ValueError("Hole handicap ratings must be unique")
        return self

    def get_hole(self, number: int) -> Optional[CourseHole]:
        """Get a hole by its number, regardless of list order."""
        for hole in self.holes:
            if hole.number == number:
                return hole
        return None

    @property
    def hole_count(self) -> int:
        return len(self.holes)

    @property
    def par(self) -> int:
        return sum(h.par for h in self.holes)

    def par3_holes(self) -> List[CourseHole]:
        """Holes eligible for closest-to-pin."""
        return [h for h in self.holes if h.par == 3]


# (number, par, handicap) for The Tribute at Otsego Club, Gaylord MI.
TRIBUTE_LAYOUT = [
    (1, 4, 13), (2, 4, 9), (3, 4, 17), (4, 5, 7), (5, 4, 5), (6, 3, 11),
    (7, 5, 3), (8, 4, 1), (9, 3, 15), (10, 4, 12), (11, 5, 8), (12, 4, 6),
    (13, 3, 14), (14, 4, 4), (15, 4, 16), (16, 5, 2), (17, 3, 18), (18, 4, 10),
]


def tribute_course() -> Course:
    """The course every round of the trip is played on."""
    return Course(
        name="The Tribute - Otsego Club",
        holes=[CourseHole(number=n, par=p, handicap=h) for n, p, h in TRIBUTE_LAYOUT],
    )
