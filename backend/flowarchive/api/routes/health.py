from __future__ import annotations

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from ...db.session import ping_database

logger = logging.getLogger(__name__)


def build_health_router(engine: AsyncEngine) -> APIRouter:
    router = APIRouter(tags=["health"])

    @router.get("/health")
    async def health():
        try:
            await ping_database(engine)
        except SQLAlchemyError:
            logger.warning("Health check could not reach the database", exc_info=True)
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unavailable"},
            )
        return {"status": "ok"}

    return router
