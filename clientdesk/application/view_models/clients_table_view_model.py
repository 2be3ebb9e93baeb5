"""
Clients table view-model.
Pure functions that turn the full client collection into what the table shows:
filter, sort, paginate, plus the set of rows the user has ticked.
"""

from datetime import date, datetime, time, timezone
from math import ceil
from typing import Any, Iterable, List, Optional, Sequence, Set

from clientdesk.application.dto.client_dto import (
    ListClientsRequestDTO, ClientWithStatsResponseDTO, ClientTablePageResponseDTO
)
from clientdesk.domain.models.client import ClientWithStats


DATE_COLUMNS = {"created_at", "earliest_start", "latest_end"}
NUMBER_COLUMNS = {"projects_count", "total_budget"}
SEARCH_FIELDS = ("name", "email", "phone")


def matches(client: ClientWithStats, search: Optional[str], status: str) -> bool:
    """Status equality (unless "all") and a case-insensitive substring search."""
    if status != "all" and client.status.value != status:
        return False
    if not search:
        return True
    needle = search.lower()
    return any(needle in (getattr(client, name) or "").lower() for name in SEARCH_FIELDS)


def _instant(value: Any) -> float:
    if value is None:
        return float("-inf")
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc).timestamp()
    return float("-inf")


def sort_key(column: str):
    """Key function for one table column."""
    if column in DATE_COLUMNS:
        return lambda client: _instant(getattr(client, column))
    if column in NUMBER_COLUMNS:
        return lambda client: getattr(client, column) or 0
    if column == "status":
        return lambda client: client.status.value
    return lambda client: (getattr(client, column) or "").lower()


def filter_and_sort(
    clients: Iterable[ClientWithStats],
    search: Optional[str] = None,
    status: str = "all",
    sort_by: Optional[str] = None,
    sort_order: str = "asc"
) -> List[ClientWithStats]:
    """
    Filter, then sort. The sort is stable, so rows that compare equal keep
    their incoming order, and no sort column means incoming order.
    """
    rows = [client for client in clients if matches(client, search, status)]
    if sort_by:
        rows.sort(key=sort_key(sort_by), reverse=(sort_order == "desc"))
    return rows


def paginate(rows: Sequence[Any], page: int, page_size: int) -> List[Any]:
    start = (page - 1) * page_size
    return list(rows[start:start + page_size])


def build_client_table_page(
    clients: Iterable[ClientWithStats],
    query: ListClientsRequestDTO
) -> ClientTablePageResponseDTO:
    """Apply a table query to the whole collection and return one page."""
    rows = filter_and_sort(
        clients,
        search=query.search,
        status=query.status,
        sort_by=query.sort_by,
        sort_order=query.sort_order,
    )
    total = len(rows)
    total_pages = ceil(total / query.page_size)

    return ClientTablePageResponseDTO(
        items=[
            ClientWithStatsResponseDTO.from_domain(client)
            for client in paginate(rows, query.page, query.page_size)
        ],
        total=total,
        page=query.page,
        page_size=query.page_size,
        total_pages=total_pages,
        has_next=query.page < total_pages,
        has_prev=query.page > 1,
    )


class ClientSelection:
    """Ids of the rows ticked in the clients table."""

    def __init__(self, ids: Iterable[str] = ()):
        self._ids: Set[str] = set(ids)

    @property
    def ids(self) -> Set[str]:
        return set(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, client_id: str) -> bool:
        return client_id in self._ids

    def toggle(self, client_id: str) -> None:
        if client_id in self._ids:
            self._ids.discard(client_id)
        else:
            self._ids.add(client_id)

    def toggle_all(self, visible_ids: Iterable[str]) -> None:
        """
        Select every visible row; when exactly the visible rows are already
        selected, clear instead.
        """
        visible = set(visible_ids)
        if visible and self._ids == visible:
            self._ids.clear()
        else:
            self._ids = visible

    def clear(self) -> None:
        self._ids.clear()
