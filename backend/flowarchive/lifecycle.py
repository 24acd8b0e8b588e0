from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable

from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from .core.settings import Settings
from .db.session import initialise_database, mask_database_url

logger = logging.getLogger(__name__)


def build_lifespan(engine: AsyncEngine, settings: Settings) -> Callable[[FastAPI], AsyncContextManager[None]]:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await initialise_database(engine)
        logger.info(
            "Knowledge backend started (database=%s, allowed origins=%s)",
            mask_database_url(settings.database_url),
            ", ".join(settings.allowed_origins) or "<none>",
        )
        try:
            yield
        finally:
            await engine.dispose()
            logger.info("Knowledge backend stopped")

    return lifespan
