"""Per-round score entry and standings endpoints."""

import asyncio
from typing import Callable, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from api.dependencies import get_mutation_lock, get_store, is_privileged
from api.schemas import ScrambleStandingsResponse
from models import RoundData, TournamentData
from payouts import SkinsOutcome, calculate_scramble_payouts, calculate_skins, calculate_team_results
from payouts import score_entry
from storage.exceptions import InvalidTournamentError, NotFoundError, StorageError, UnauthorizedError
from storage.store import TournamentStore

router = APIRouter()


class SkinsScoreUpdate(BaseModel):
    player_id: str
    hole: int
    score: int = 0


class ClosestToPinUpdate(BaseModel):
    player_id: str
    distance: Optional[str] = None


class TeamSlotUpdate(BaseModel):
    player_id: Optional[str] = None


class TeamScoreUpdate(BaseModel):
    total_score: int = 0


class TeamNameUpdate(BaseModel):
    name: str = ""


def _require_round(tournament: TournamentData, round_id: str) -> RoundData:
    round_data = tournament.get_round(round_id)
    if round_data is None:
        raise NotFoundError(f"Round {round_id} not found")
    return round_data


async def _mutate_round(
    store: TournamentStore,
    lock: asyncio.Lock,
    privileged: bool,
    round_id: str,
    change: Callable[[TournamentData, RoundData], None],
) -> RoundData:
    """Load, apply one change, save. Held under the lock so results never interleave."""
    if not privileged:
        raise HTTPException(403, "Unauthorized. Admin access required.")
    try:
        async with lock:
            tournament = await store.load(fallback=False)
            round_data = _require_round(tournament, round_id)
            change(tournament, round_data)
            saved = await store.save(tournament, privileged)
    except NotFoundError as e:
        raise HTTPException(404, str(e))
    except UnauthorizedError as e:
        raise HTTPException(403, str(e))
    except (InvalidTournamentError, ValueError) as e:
        raise HTTPException(400, str(e))
    except StorageError as e:
        raise HTTPException(503, str(e))
    return _require_round(saved, round_id)


# ================================================================
# Skins
# ================================================================

@router.get("/{round_id}/skins", response_model=SkinsOutcome)
async def get_skins(round_id: str, store: TournamentStore = Depends(get_store)):
    tournament = await store.load()
    round_data = tournament.get_round(round_id)
    if not round_data:
        raise HTTPException(404, "Round not found")
    return calculate_skins(round_data.skins_game, tournament.course)


@router.put("/{round_id}/skins/scores", response_model=RoundData)
async def update_skins_score(
    round_id: str,
    req: SkinsScoreUpdate,
    privileged: bool = Depends(is_privileged),
    store: TournamentStore = Depends(get_store),
    lock: asyncio.Lock = Depends(get_mutation_lock),
):
    """Enter or clear (score 0) one player's gross score on one hole."""
    return await _mutate_round(
        store, lock, privileged, round_id,
        lambda t, r: score_entry.record_skins_score(r, t.course, req.player_id, req.hole, req.score),
    )


# ================================================================
# Closest to pin
# ================================================================

@router.put("/{round_id}/closest-to-pin/{hole}", response_model=RoundData)
async def set_closest_to_pin_winner(
    round_id: str,
    hole: int,
    req: ClosestToPinUpdate,
    privileged: bool = Depends(is_privileged),
    store: TournamentStore = Depends(get_store),
    lock: asyncio.Lock = Depends(get_mutation_lock),
):
    return await _mutate_round(
        store, lock, privileged, round_id,
        lambda t, r: score_entry.set_ctp_winner(r, hole, req.player_id, req.distance),
    )


@router.delete("/{round_id}/closest-to-pin/{hole}", response_model=RoundData)
async def clear_closest_to_pin_winner(
    round_id: str,
    hole: int,
    privileged: bool = Depends(is_privileged),
    store: TournamentStore = Depends(get_store),
    lock: asyncio.Lock = Depends(get_mutation_lock),
):
    return await _mutate_round(
        store, lock, privileged, round_id,
        lambda t, r: score_entry.clear_ctp_winner(r, hole),
    )


# ================================================================
# Scramble
# ================================================================

@router.get("/{round_id}/scramble", response_model=ScrambleStandingsResponse)
async def get_scramble(round_id: str, store: TournamentStore = Depends(get_store)):
    tournament = await store.load()
    round_data = tournament.get_round(round_id)
    if not round_data:
        raise HTTPException(404, "Round not found")
    game = round_data.scramble_game
    return ScrambleStandingsResponse(
        round_id=round_id,
        results=calculate_team_results(game),
        payouts=calculate_scramble_payouts(game),
    )


@router.put("/{round_id}/scramble/teams/{team_id}/slots/{slot}", response_model=RoundData)
async def update_team_slot(
    round_id: str,
    team_id: str,
    slot: int,
    req: TeamSlotUpdate,
    privileged: bool = Depends(is_privileged),
    store: TournamentStore = Depends(get_store),
    lock: asyncio.Lock = Depends(get_mutation_lock),
):
    """Seat a player in a team slot, or empty it with a null player_id."""
    return await _mutate_round(
        store, lock, privileged, round_id,
        lambda t, r: score_entry.set_team_player(r, team_id, slot, req.player_id),
    )


@router.put("/{round_id}/scramble/teams/{team_id}/score", response_model=RoundData)
async def update_team_score(
    round_id: str,
    team_id: str,
    req: TeamScoreUpdate,
    privileged: bool = Depends(is_privileged),
    store: TournamentStore = Depends(get_store),
    lock: asyncio.Lock = Depends(get_mutation_lock),
):
    return await _mutate_round(
        store, lock, privileged, round_id,
        lambda t, r: score_entry.set_team_total_score(r, team_id, req.total_score),
    )


@router.put("/{round_id}/scramble/teams/{team_id}/name", response_model=RoundData)
async def update_team_name(
    round_id: str,
    team_id: str,
    req: TeamNameUpdate,
    privileged: bool = Depends(is_privileged),
    store: TournamentStore = Depends(get_store),
    lock: asyncio.Lock = Depends(get_mutation_lock),
):
    return await _mutate_round(
        store, lock, privileged, round_id,
        lambda t, r: score_entry.set_team_name(r, team_id, req.name),
    )
