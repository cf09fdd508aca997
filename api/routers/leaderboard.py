"""Leaderboard endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_store
from api.schemas import LeaderboardReportResponse
from payouts import TOTAL_SCOPE, Leaderboard, build_leaderboard, leaderboard_rows
from storage.store import TournamentStore

router = APIRouter()


async def _leaderboard(store: TournamentStore, scope: str) -> Leaderboard:
    tournament = await store.load()
    leaderboard = build_leaderboard(tournament, scope)
    if leaderboard is None:
        raise HTTPException(404, "Round not found")
    return leaderboard


@router.get("", response_model=Leaderboard)
async def get_leaderboard(
    scope: str = Query(TOTAL_SCOPE),
    store: TournamentStore = Depends(get_store),
):
    """Players ranked by winnings for one round id, or ``total`` for the trip."""
    return await _leaderboard(store, scope)


@router.get("/report", response_model=LeaderboardReportResponse)
async def get_leaderboard_report(
    scope: str = Query(TOTAL_SCOPE),
    store: TournamentStore = Depends(get_store),
):
    leaderboard = await _leaderboard(store, scope)
    return LeaderboardReportResponse(
        scope=leaderboard.scope,
        title=leaderboard.title,
        prize_pool=leaderboard.prize_pool,
        rows=leaderboard_rows(leaderboard),
    )
