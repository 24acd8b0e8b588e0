from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Query, Response, status

from ...core.settings import API_BASE_PATH
from ...models import Knowledge
from ...repositories import KnowledgeRepository
from ...schemas import KnowledgePage, KnowledgeRead, KnowledgeWrite
from ...services.converters import knowledge_to_read, page_to_read
from ..pagination import parse_page_request

logger = logging.getLogger(__name__)

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"description": "Knowledge not found."}}


def build_knowledge_router(repository: KnowledgeRepository) -> APIRouter:
    """Create the ``/api/knowledge`` routes bound to ``repository``."""

    router = APIRouter(prefix=API_BASE_PATH, tags=["knowledge"])

    @router.get("", response_model=KnowledgePage)
    @router.get("/", response_model=KnowledgePage, include_in_schema=False)
    async def list_knowledge(
        page: Optional[str] = Query(default=None),
        size: Optional[str] = Query(default=None),
        sort: Optional[List[str]] = Query(default=None),
    ):
        page_request = parse_page_request(page, size, sort)
        items, total = await repository.list(page_request)
        return page_to_read(items, total, page_request)

    @router.get("/{knowledge_id}", response_model=KnowledgeRead, responses=NOT_FOUND_RESPONSE)
    async def get_knowledge(knowledge_id: int):
        record = await repository.get_by_id(knowledge_id)
        if record is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return knowledge_to_read(record)

    @router.post("", response_model=KnowledgeRead)
    @router.post("/", response_model=KnowledgeRead, include_in_schema=False)
    async def create_knowledge(payload: KnowledgeWrite):
        record = Knowledge(title=payload.title, content=payload.content)
        saved = await repository.save(record)
        return knowledge_to_read(saved)

    @router.put("/{knowledge_id}", response_model=KnowledgeRead, responses=NOT_FOUND_RESPONSE)
    async def update_knowledge(knowledge_id: int, payload: KnowledgeWrite):
        record = await repository.get_by_id(knowledge_id)
        if record is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)

        record.title = payload.title
        record.content = payload.content
        saved = await repository.save(record)
        return knowledge_to_read(saved)

    @router.delete("/{knowledge_id}", responses=NOT_FOUND_RESPONSE)
    async def delete_knowledge(knowledge_id: int):
        record = await repository.get_by_id(knowledge_id)
        if record is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)

        await repository.delete(record)
        return Response(status_code=status.HTTP_200_OK)

    return router
