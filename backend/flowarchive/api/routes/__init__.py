from __future__ import annotations

from .health import build_health_router
from .knowledge import build_knowledge_router

__all__ = [
    "build_health_router",
    "build_knowledge_router",
]
