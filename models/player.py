from pydantic import Field
from typing import Literal

from .base import BaseGolfModel

Group = Literal["A", "B", "C", "D"]


class Player(BaseGolfModel):
    """A trip golfer. The skill group drives stroke allocation; handicap is descriptive only."""
    id: str
    name: str
    group: Group
    handicap: float = Field(0, ge=-10, le=54)
