from .knowledge import SORTABLE_COLUMNS, KnowledgeRepository
from .paging import PageRequest, SortOrder

__all__ = [
    "KnowledgeRepository",
    "PageRequest",
    "SORTABLE_COLUMNS",
    "SortOrder",
]
