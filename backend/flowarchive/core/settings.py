from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

load_dotenv()

API_BASE_PATH = "/api/knowledge"

DEFAULT_PAGE_SIZE = 6
MAX_PAGE_SIZE = 2000
DEFAULT_SORT_FIELD = "createdAt"
DEFAULT_SORT_DIRECTION = "desc"

FRONTEND_URL_LEGACY = "http://localhost:3000"
FRONTEND_URL_DEV = "http://localhost:5173"

CORS_ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE", "OPTIONS")
CORS_MAX_AGE = 3600

_DEFAULT_DB_PATH = Path(
    os.getenv("DATABASE_FILE", Path(__file__).resolve().parents[2] / "data.db")
)


def _default_database_url() -> str:
    _DEFAULT_DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite+aiosqlite:///{_DEFAULT_DB_PATH}"


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def cors_allowed_origins(raw: Optional[str]) -> Tuple[str, ...]:
    """Split a comma separated origin list, dropping blank entries."""
    if raw is None:
        return (FRONTEND_URL_LEGACY, FRONTEND_URL_DEV)
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@dataclass(frozen=True)
class Settings:
    database_url: str
    database_echo: bool = False
    allowed_origins: Tuple[str, ...] = (FRONTEND_URL_LEGACY, FRONTEND_URL_DEV)
    log_level: str = "INFO"
    port: int = 8080


def load_settings() -> Settings:
    return Settings(
        database_url=os.getenv("DATABASE_URL") or _default_database_url(),
        database_echo=_env_flag("DATABASE_ECHO"),
        allowed_origins=cors_allowed_origins(os.getenv("CORS_ALLOWED_ORIGINS")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        port=int(os.getenv("PORT", "8080")),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
