from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path
from typing import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from ..application import create_app
from ..core.settings import Settings
from ..db.session import create_engine, create_session_factory, initialise_database
from ..repositories import KnowledgeRepository


class TickingClock:
    """Returns a strictly increasing time on every call."""

    START = datetime(2024, 1, 1, 9, 0, 0)

    def __init__(self, start: datetime = START, step: timedelta = timedelta(seconds=1)) -> None:
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        return value


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'knowledge.db'}")


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    application = create_app(settings)
    await initialise_database(application.state.engine)
    yield application
    await application.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as http:
        yield http


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest_asyncio.fixture
async def repository(settings: Settings, clock: TickingClock) -> AsyncIterator[KnowledgeRepository]:
    engine = create_engine(settings.database_url)
    await initialise_database(engine)
    yield KnowledgeRepository(create_session_factory(engine), clock=clock)
    await engine.dispose()
