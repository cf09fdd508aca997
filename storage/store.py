"""Load/save/clear boundary for the tournament aggregate."""

from __future__ import annotations

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Union

from pydantic import ValidationError

from models import TournamentData
from payouts.leaderboard import total_winnings_by_player
from payouts.score_entry import recompute_round
from storage.exceptions import InvalidTournamentError, StorageError, UnauthorizedError
from storage.seed import build_seed_tournament

logger = logging.getLogger(__name__)


class TournamentStore(Protocol):
    """Interface the API uses for persistence.

    Any class with matching method signatures satisfies this protocol.
    """

    async def load(self, fallback: bool = True) -> TournamentData:
        """Return the saved tournament, or the seed tournament if there is none.

        With ``fallback=False`` a failed read raises StorageError instead of
        returning the seed.
        """
        ...

    async def save(self, payload: Any, privileged: bool) -> TournamentData:
        """Replace the saved tournament. Raises UnauthorizedError / InvalidTournamentError."""
        ...

    async def clear(self, privileged: bool) -> None:
        """Remove saved state so the next load returns the seed."""
        ...


def refresh_derived(data: TournamentData) -> TournamentData:
    """Rebuild skins/scramble results and trip totals from the recorded inputs."""
    for round_data in data.rounds:
        recompute_round(round_data, data.course)
    data.total_winnings = total_winnings_by_player(data)
    return data


def validate_payload(payload: Union[TournamentData, Dict[str, Any]]) -> TournamentData:
    """Check the minimal shape (a non-empty ``rounds`` list), then the full model."""
    if isinstance(payload, TournamentData):
        payload = payload.model_dump(mode="json")

    if not isinstance(payload, dict):
        raise InvalidTournamentError("Invalid data structure")
    rounds = payload.get("rounds")
    if not isinstance(rounds, list) or not rounds:
        raise InvalidTournamentError("Invalid data structure: rounds must be a non-empty list")

    try:
        data = TournamentData.model_validate(payload)
    except ValidationError as e:
        raise InvalidTournamentError(f"Invalid tournament data: {e.errors()[0]['msg']}") from e
    return refresh_derived(data)


class BaseTournamentStore:
    """Shared rules for every backend. Subclasses only move JSON blobs."""

    async def _read(self) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    async def _write(self, blob: Dict[str, Any]) -> None:
        raise NotImplementedError

    async def _delete(self) -> None:
        raise NotImplementedError

    async def load(self, fallback: bool = True) -> TournamentData:
        try:
            blob = await self._read()
            if blob is not None:
                return validate_payload(blob)
        except (StorageError, OSError, ValueError) as e:
            if not fallback:
                logger.error("Error loading tournament data: %s", e)
                raise StorageError(f"Tournament data unavailable: {e}") from e
            logger.exception("Error loading tournament data; using seed data")
        return refresh_derived(build_seed_tournament())

    async def save(self, payload: Any, privileged: bool) -> TournamentData:
        if not privileged:
            raise UnauthorizedError("Unauthorized. Admin access required.")
        data = validate_payload(payload)
        await self._write(data.model_dump(mode="json"))
        logger.info("Saved tournament data (%d rounds)", len(data.rounds))
        return data

    async def clear(self, privileged: bool) -> None:
        if not privileged:
            raise UnauthorizedError("Unauthorized. Admin access required.")
        await self._delete()
        logger.info("Cleared tournament data")


class MemoryTournamentStore(BaseTournamentStore):
    """Process-wide fallback when no external persistence is configured.

    Seeded on first read, replaced wholesale on write, emptied on clear.
    """

    def __init__(self) -> None:
        self._blob: Optional[str] = None

    @property
    def is_initialized(self) -> bool:
        return self._blob is not None

    async def _read(self) -> Optional[Dict[str, Any]]:
        if self._blob is None:
            seed = build_seed_tournament()
            self._blob = json.dumps(seed.model_dump(mode="json"))
        return json.loads(self._blob)

    async def _write(self, blob: Dict[str, Any]) -> None:
        self._blob = json.dumps(blob)

    async def _delete(self) -> None:
        self._blob = None


class JsonFileTournamentStore(BaseTournamentStore):
    """One JSON file on disk, created with seed data on first read."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def _read_file(self) -> Dict[str, Any]:
        if not self.path.exists():
            self._write_file(build_seed_tournament().model_dump(mode="json"))
        return json.loads(self.path.read_text(encoding="utf-8"))

    def _write_file(self, blob: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(blob, indent=2), encoding="utf-8")
        os.replace(tmp_path, self.path)

    async def _read(self) -> Optional[Dict[str, Any]]:
        return await asyncio.to_thread(self._read_file)

    async def _write(self, blob: Dict[str, Any]) -> None:
        await asyncio.to_thread(self._write_file, blob)

    async def _delete(self) -> None:
        await asyncio.to_thread(self.path.unlink, missing_ok=True)


# Module-level fallback cache shared by the process
memory_store = MemoryTournamentStore()
