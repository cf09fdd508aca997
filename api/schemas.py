"""API-specific request and response models."""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from models import ScrambleScore
from payouts import TeamPayout


class SuccessResponse(BaseModel):
    success: bool = True


class ScrambleStandingsResponse(BaseModel):
    """Team totals in finishing order with what each team is paid."""
    round_id: str
    results: List[ScrambleScore]
    payouts: List[TeamPayout]


class LeaderboardReportResponse(BaseModel):
    """Pre-formatted rows handed to the report/export renderer."""
    scope: str
    title: str
    prize_pool: float
    rows: List[Dict[str, Any]] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str
    storage: str
    database: Optional[bool] = None
