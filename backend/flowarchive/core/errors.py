from __future__ import annotations


class KnowledgeError(Exception):
    """Base class for knowledge backend failures."""


class KnowledgeNotFoundError(KnowledgeError):
    def __init__(self, knowledge_id: int) -> None:
        super().__init__(f"Knowledge {knowledge_id} not found.")
        self.knowledge_id = knowledge_id


class StorageUnavailableError(KnowledgeError):
    """The underlying database could not complete the operation."""


class InvalidSortError(KnowledgeError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Cannot sort by unknown property '{field}'.")
        self.field = field
