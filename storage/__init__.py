from storage.connection import DatabasePool, db
from storage.exceptions import InvalidTournamentError, NotFoundError, StorageError, UnauthorizedError
from storage.postgres_store import PostgresTournamentStore
from storage.seed import build_seed_tournament
from storage.store import (
    BaseTournamentStore,
    JsonFileTournamentStore,
    MemoryTournamentStore,
    TournamentStore,
    memory_store,
    validate_payload,
)

__all__ = [
    "DatabasePool",
    "db",
    "BaseTournamentStore",
    "JsonFileTournamentStore",
    "MemoryTournamentStore",
    "PostgresTournamentStore",
    "TournamentStore",
    "memory_store",
    "validate_payload",
    "build_seed_tournament",
    "StorageError",
    "UnauthorizedError",
    "InvalidTournamentError",
    "NotFoundError",
]
