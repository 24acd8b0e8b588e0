from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..core.errors import InvalidSortError
from ..core.settings import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from ..repositories import SORTABLE_COLUMNS, PageRequest, SortOrder
from ..repositories.paging import ASC, DEFAULT_ORDERS, DESC, MAX_PAGE, is_storable_int

_DIRECTIONS = {ASC, DESC}


def _parse_int(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    if not is_storable_int(value):
        return None
    return value


def parse_sort(values: Optional[Sequence[str]]) -> Tuple[SortOrder, ...]:
    """Parse ``sort`` query values of the form ``field[,field...][,asc|desc]``."""
    orders: List[SortOrder] = []
    for value in values or ():
        tokens = [token.strip() for token in value.split(",") if token.strip()]
        if not tokens:
            continue
        direction = ASC
        if tokens[-1].lower() in _DIRECTIONS:
            direction = tokens.pop().lower()
        for name in tokens:
            if name not in SORTABLE_COLUMNS:
                raise InvalidSortError(name)
            orders.append(SortOrder(name, direction))
    return tuple(orders) or DEFAULT_ORDERS


def parse_page_request(
    page: Optional[str] = None,
    size: Optional[str] = None,
    sort: Optional[Sequence[str]] = None,
) -> PageRequest:
    page_number = _parse_int(page)
    if page_number is None or page_number < 0:
        page_number = 0
    page_number = min(page_number, MAX_PAGE)

    page_size = _parse_int(size)
    if page_size is None or page_size < 1:
        page_size = DEFAULT_PAGE_SIZE
    page_size = min(page_size, MAX_PAGE_SIZE)

    return PageRequest(page=page_number, size=page_size, orders=parse_sort(sort))
