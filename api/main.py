"""FastAPI application for the golf trip payouts API."""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.schemas import HealthResponse
from api.settings import Settings
from storage.connection import db
from storage.postgres_store import PostgresTournamentStore
from storage.store import JsonFileTournamentStore, TournamentStore, memory_store

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Console logging for the app; leaves existing handlers alone."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


async def build_store(settings: Settings) -> TournamentStore:
    """Pick the persistence backend named in settings."""
    if settings.storage == "postgres":
        if not settings.database_url:
            raise RuntimeError("TOURNAMENT_STORAGE=postgres requires DATABASE_URL")
        await db.initialize(dsn=settings.database_url)
        store = PostgresTournamentStore(db.pool, key=settings.tournament_key)
        await store.ensure_schema()
        return store
    if settings.storage == "file":
        return JsonFileTournamentStore(settings.data_file)
    return memory_store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Set up the tournament store on startup, close the DB pool on shutdown."""
    settings = app.state.settings
    app.state.store = await build_store(settings)
    app.state.mutation_lock = asyncio.Lock()
    logger.info("Tournament storage: %s", settings.storage)
    yield
    await db.close()


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Golf Trip Payouts API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import leaderboard, rounds, tournament
    app.include_router(tournament.router, prefix="/api/tournament", tags=["tournament"])
    app.include_router(leaderboard.router, prefix="/api/leaderboard", tags=["leaderboard"])
    app.include_router(rounds.router, prefix="/api/rounds", tags=["rounds"])

    @app.get("/api/health", response_model=HealthResponse)
    async def health():
        if settings.storage != "postgres":
            return HealthResponse(status="ok", storage=settings.storage)
        healthy = await db.health_check()
        return HealthResponse(
            status="ok" if healthy else "degraded",
            storage=settings.storage,
            database=healthy,
        )

    return app


app = create_app()
