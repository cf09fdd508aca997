import asyncio
from typing import Optional

from fastapi import Header, Request

from api.settings import Settings
from storage.store import TournamentStore


def get_store(request: Request) -> TournamentStore:
    """FastAPI dependency that provides the configured tournament store."""
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_mutation_lock(request: Request) -> asyncio.Lock:
    """Serializes load-mutate-save cycles within this process."""
    return request.app.state.mutation_lock


def is_privileged(
    request: Request,
    x_user_role: Optional[str] = Header(None),
) -> bool:
    """Authentication happens upstream; we only see the resulting role."""
    return x_user_role is not None and x_user_role == request.app.state.settings.admin_role
