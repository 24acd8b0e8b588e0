from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class KnowledgeWrite(CamelModel):
    title: Optional[str] = None
    content: Optional[str] = None


class KnowledgeRead(CamelModel):
    id: int
    title: Optional[str] = None
    content: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class SortRead(CamelModel):
    sorted: bool
    unsorted: bool
    empty: bool


class PageableRead(CamelModel):
    page_number: int
    page_size: int
    offset: int
    paged: bool = True
    unpaged: bool = False
    sort: SortRead


class KnowledgePage(CamelModel):
    content: List[KnowledgeRead]
    pageable: PageableRead
    total_elements: int
    total_pages: int
    last: bool
    first: bool
    size: int
    number: int
    number_of_elements: int
    empty: bool
    sort: SortRead
