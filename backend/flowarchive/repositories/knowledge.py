from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, AsyncIterator, Callable, List, Optional, Sequence, Tuple

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker

from ..core.errors import InvalidSortError, KnowledgeNotFoundError, StorageUnavailableError
from ..models import Knowledge
from .paging import PageRequest, SortOrder, is_storable_int

logger = logging.getLogger(__name__)

SORTABLE_COLUMNS = {
    "id": Knowledge.id,
    "title": Knowledge.title,
    "content": Knowledge.content,
    "createdAt": Knowledge.created_at,
    "updatedAt": Knowledge.updated_at,
}


class KnowledgeRepository:
    """Reads and writes knowledge articles, one session per call.

    Timestamps are stamped here: inserts set ``created_at`` and ``updated_at``
    from the same clock reading, updates only move ``updated_at`` forward.
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._session_factory = session_factory
        self._clock = clock

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        try:
            async with self._session_factory() as session:
                yield session
        except SQLAlchemyError as exc:
            logger.exception("Knowledge store operation failed")
            raise StorageUnavailableError("Storage unavailable") from exc

    @staticmethod
    def _order_by(orders: Sequence[SortOrder]) -> List[Any]:
        clauses = []
        for order in orders:
            column = SORTABLE_COLUMNS.get(order.field)
            if column is None:
                raise InvalidSortError(order.field)
            clauses.append(column.desc() if order.descending else column.asc())
        if all(order.field != "id" for order in orders):
            clauses.append(Knowledge.id.asc())
        return clauses

    async def list(self, page_request: Optional[PageRequest] = None) -> Tuple[List[Knowledge], int]:
        page_request = page_request or PageRequest()
        order_by = self._order_by(page_request.orders)
        async with self._session() as session:
            total = await session.scalar(select(func.count()).select_from(Knowledge))
            result = await session.execute(
                select(Knowledge)
                .order_by(*order_by)
                .offset(page_request.offset)
                .limit(page_request.size)
            )
            items = result.scalars().all()
        return list(items), int(total or 0)

    async def count(self) -> int:
        async with self._session() as session:
            total = await session.scalar(select(func.count()).select_from(Knowledge))
        return int(total or 0)

    async def get_by_id(self, knowledge_id: int) -> Optional[Knowledge]:
        if not is_storable_int(knowledge_id):
            logger.debug("Knowledge %s is outside the identifier range", knowledge_id)
            return None
        async with self._session() as session:
            record = await session.get(Knowledge, knowledge_id)
        if record is None:
            logger.debug("Knowledge %s not found", knowledge_id)
        return record

    async def save(self, record: Knowledge) -> Knowledge:
        now = self._clock()
        async with self._session() as session:
            if record.id is None:
                record.created_at = now
                record.updated_at = now
                session.add(record)
                await session.commit()
                await session.refresh(record)
                logger.info("Created knowledge %s", record.id)
                return record

            existing = None
            if is_storable_int(record.id):
                existing = await session.get(Knowledge, record.id)
            if existing is None:
                raise KnowledgeNotFoundError(record.id)
            existing.title = record.title
            existing.content = record.content
            existing.updated_at = max(now, existing.updated_at)
            await session.commit()
            await session.refresh(existing)
            logger.info("Updated knowledge %s", existing.id)
            return existing

    async def delete(self, record: Knowledge) -> None:
        if not is_storable_int(record.id):
            return
        async with self._session() as session:
            await session.execute(delete(Knowledge).where(Knowledge.id == record.id))
            await session.commit()
        logger.info("Deleted knowledge %s", record.id)
