from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

from ..core.settings import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_FIELD,
    MAX_PAGE_SIZE,
)

ASC = "asc"
DESC = "desc"

# Identifiers and offsets are stored as signed 64-bit integers.
MIN_STORED_INT = -(2**63)
MAX_STORED_INT = 2**63 - 1
MAX_PAGE = MAX_STORED_INT // MAX_PAGE_SIZE


def is_storable_int(value: int) -> bool:
    return MIN_STORED_INT <= value <= MAX_STORED_INT


@dataclass(frozen=True)
class SortOrder:
    field: str
    direction: str = ASC

    @property
    def descending(self) -> bool:
        return self.direction == DESC


DEFAULT_ORDERS: Tuple[SortOrder, ...] = (SortOrder(DEFAULT_SORT_FIELD, DEFAULT_SORT_DIRECTION),)


@dataclass(frozen=True)
class PageRequest:
    """A zero-based window over an ordered result set."""

    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    orders: Tuple[SortOrder, ...] = field(default=DEFAULT_ORDERS)

    @property
    def offset(self) -> int:
        return self.page * self.size


def total_pages(total: int, size: int) -> int:
    if size < 1:
        return 1
    return math.ceil(total / size)
