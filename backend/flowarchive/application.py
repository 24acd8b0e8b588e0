from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.errors import register_exception_handlers
from .api.router import register_routes
from .core.settings import CORS_ALLOWED_METHODS, CORS_MAX_AGE, Settings, get_settings
from .db.session import create_engine, create_session_factory
from .lifecycle import build_lifespan
from .repositories import KnowledgeRepository


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[KnowledgeRepository] = None,
) -> FastAPI:
    settings = settings or get_settings()

    # Schema creation and the health check always run against the configured database.
    engine = create_engine(settings.database_url, echo=settings.database_echo)
    if repository is None:
        repository = KnowledgeRepository(create_session_factory(engine))

    app = FastAPI(title="FlowArchive Knowledge Backend", lifespan=build_lifespan(engine, settings))
    app.state.engine = engine
    app.state.repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=True,
        allow_methods=list(CORS_ALLOWED_METHODS),
        allow_headers=["*"],
        max_age=CORS_MAX_AGE,
    )

    register_exception_handlers(app)
    register_routes(app, repository, engine)

    return app
