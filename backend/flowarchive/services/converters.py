from __future__ import annotations

from typing import Sequence

from ..models import Knowledge
from ..repositories import PageRequest
from ..repositories.paging import total_pages
from ..schemas import KnowledgePage, KnowledgeRead, PageableRead, SortRead


def knowledge_to_read(record: Knowledge) -> KnowledgeRead:
    return KnowledgeRead(
        id=record.id,
        title=record.title,
        content=record.content,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def sort_to_read(page_request: PageRequest) -> SortRead:
    has_orders = bool(page_request.orders)
    return SortRead(sorted=has_orders, unsorted=not has_orders, empty=not has_orders)


def page_to_read(
    items: Sequence[Knowledge], total: int, page_request: PageRequest
) -> KnowledgePage:
    pages = total_pages(total, page_request.size)
    sort = sort_to_read(page_request)
    return KnowledgePage(
        content=[knowledge_to_read(item) for item in items],
        pageable=PageableRead(
            page_number=page_request.page,
            page_size=page_request.size,
            offset=page_request.offset,
            sort=sort,
        ),
        total_elements=total,
        total_pages=pages,
        first=page_request.page == 0,
        last=page_request.page + 1 >= pages,
        size=page_request.size,
        number=page_request.page,
        number_of_elements=len(items),
        empty=not items,
        sort=sort,
    )
