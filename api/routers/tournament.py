"""Whole-tournament load/save/reset endpoints."""

import asyncio
import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException

from api.dependencies import get_mutation_lock, get_store, is_privileged
from api.schemas import SuccessResponse
from models import TournamentData
from storage.exceptions import InvalidTournamentError, UnauthorizedError
from storage.store import TournamentStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=TournamentData)
async def get_tournament(store: TournamentStore = Depends(get_store)):
    return await store.load()


@router.post("", response_model=SuccessResponse)
async def save_tournament(
    data: Dict[str, Any] = Body(...),
    privileged: bool = Depends(is_privileged),
    store: TournamentStore = Depends(get_store),
    lock: asyncio.Lock = Depends(get_mutation_lock),
):
    """Replace the whole tournament (admin only)."""
    try:
        async with lock:
            await store.save(data, privileged)
    except UnauthorizedError as e:
        raise HTTPException(403, str(e))
    except InvalidTournamentError as e:
        logger.warning("Rejected tournament save: %s", e)
        raise HTTPException(400, str(e))
    return SuccessResponse()


@router.delete("", response_model=SuccessResponse)
async def clear_tournament(
    privileged: bool = Depends(is_privileged),
    store: TournamentStore = Depends(get_store),
    lock: asyncio.Lock = Depends(get_mutation_lock),
):
    """Drop saved state; the next load returns the seed tournament."""
    try:
        async with lock:
            await store.clear(privileged)
    except UnauthorizedError as e:
        raise HTTPException(403, str(e))
    return SuccessResponse()
