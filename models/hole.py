from pydantic import Field
from typing import Optional

from .base import BaseGolfModel


class CourseHole(BaseGolfModel):
    """Represents a single hole on the course layout."""
    number: int = Field(..., ge=1)
    par: int = Field(..., ge=3, le=6)
    handicap: Optional[int] = Field(None, ge=1)  # 1 = hardest
