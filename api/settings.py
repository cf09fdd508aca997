"""Runtime configuration, read from the environment (and a local .env file)."""

import os
from typing import List, Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

StorageBackend = Literal["memory", "file", "postgres"]


class Settings(BaseModel):
    storage: StorageBackend = "memory"
    data_file: str = "tournament-data.json"
    database_url: Optional[str] = None
    tournament_key: str = "default"
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    admin_role: str = "admin"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        values = {
            "storage": os.getenv("TOURNAMENT_STORAGE", "memory").lower(),
            "data_file": os.getenv("TOURNAMENT_DATA_FILE", "tournament-data.json"),
            "database_url": os.getenv("DATABASE_URL"),
            "tournament_key": os.getenv("TOURNAMENT_KEY", "default"),
            "admin_role": os.getenv("ADMIN_ROLE", "admin"),
            "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
        }
        origins = os.getenv("CORS_ORIGINS")
        if origins:
            values["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]
        return cls(**values)
