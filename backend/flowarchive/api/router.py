from __future__ import annotations

from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from ..repositories import KnowledgeRepository
from .routes import build_health_router, build_knowledge_router


def register_routes(app: FastAPI, repository: KnowledgeRepository, engine: AsyncEngine) -> None:
    app.include_router(build_knowledge_router(repository))
    app.include_router(build_health_router(engine))
