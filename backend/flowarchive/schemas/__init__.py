from .knowledge import (
    KnowledgePage,
    KnowledgeRead,
    KnowledgeWrite,
    PageableRead,
    SortRead,
)

__all__ = [
    "KnowledgePage",
    "KnowledgeRead",
    "KnowledgeWrite",
    "PageableRead",
    "SortRead",
]
