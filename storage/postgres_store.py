"""Tournament blob kept in a single Postgres JSONB row."""

import json
import logging
from typing import Any, Dict, Optional

import asyncpg

from storage.exceptions import StorageError
from storage.store import BaseTournamentStore

logger = logging.getLogger(__name__)

CREATE_TABLE_SQL = """
CREATE SCHEMA IF NOT EXISTS app;
CREATE TABLE IF NOT EXISTS app.tournament_state (
    key        TEXT PRIMARY KEY,
    data       JSONB NOT NULL,
    updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
)
"""


class PostgresTournamentStore(BaseTournamentStore):
    """Async key/value persistence over an asyncpg pool."""

    def __init__(self, pool: asyncpg.Pool, key: str = "default"):
        self._pool = pool
        self.key = key

    async def ensure_schema(self) -> None:
        """Create the state table if needed. Call once at app startup."""
        async with self._pool.acquire() as conn:
            await conn.execute(CREATE_TABLE_SQL)

    async def _read(self) -> Optional[Dict[str, Any]]:
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    "SELECT data FROM app.tournament_state WHERE key = $1", self.key
                )
        except (asyncpg.PostgresError, OSError) as e:
            raise StorageError(f"Could not read tournament state: {e}") from e

        if row is None:
            return None
        data = row["data"]
        return json.loads(data) if isinstance(data, str) else data

    async def _write(self, blob: Dict[str, Any]) -> None:
        try:
            async with self._pool.acquire() as conn:
                await conn.execute(
                    """INSERT INTO app.tournament_state (key, data, updated_at)
                       VALUES ($1, $2::jsonb, now())
                       ON CONFLICT (key) DO UPDATE
                       SET data = EXCLUDED.data, updated_at = now()""",
                    self.key, json.dumps(blob),
                )
        except (asyncpg.PostgresError, OSError) as e:
            raise StorageError(f"Could not save tournament state: {e}") from e

    async def _delete(self) -> None:
        try:
            async with self._pool.acquire() as conn:
                await conn.execute(
                    "DELETE FROM app.tournament_state WHERE key = $1", self.key
                )
        except (asyncpg.PostgresError, OSError) as e:
            raise StorageError(f"Could not clear tournament state: {e}") from e
