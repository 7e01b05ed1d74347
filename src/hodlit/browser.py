"""Stateful pagination over backtest records."""

from __future__ import annotations

from typing import Optional

from .api.backtest import DEFAULT_PAGE_SIZE, BacktestClient
from .pagination import DEFAULT_WINDOW_SIZE, compute_window, validate_transition
from .schemas import BacktestPage, BacktestRecord, PaginationInfo


class RecordBrowser:
    """Track filters and the current page of :class:`BacktestRecord` results.

    Page changes outside ``[1, total_pages]`` are rejected without a fetch.
    Responses are not tagged, so with overlapping calls the last one to
    settle wins.
    """

    def __init__(
        self,
        client: BacktestClient,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        window_size: int = DEFAULT_WINDOW_SIZE,
    ):
        self._client = client
        self.page_size = page_size
        self.window_size = window_size
        self.symbol: Optional[str] = None
        self.status: Optional[int] = None
        self.current: BacktestPage = BacktestPage.empty(1, page_size)

    @property
    def records(self) -> list[BacktestRecord]:
        return self.current.records

    @property
    def pagination(self) -> PaginationInfo:
        return self.current.pagination

    def fetch(self, page: int) -> BacktestPage:
        self.current = self._client.list_records(
            page, self.page_size, self.symbol, self.status)
        return self.current

    def search(self, symbol: Optional[str] = None, status: Optional[int] = None) -> BacktestPage:
        """Apply new filters and reload from the first page."""

        self.symbol = symbol or None
        self.status = status
        return self.fetch(1)

    def go_to(self, page: int) -> Optional[BacktestPage]:
        """Load ``page`` if it is within bounds; ``None`` when rejected."""

        accepted = validate_transition(page, self.pagination.total_pages)
        if accepted is None:
            return None
        return self.fetch(accepted)

    def next_page(self) -> Optional[BacktestPage]:
        return self.go_to(self.pagination.current_page + 1)

    def previous_page(self) -> Optional[BacktestPage]:
        return self.go_to(self.pagination.current_page - 1)

    def window(self) -> list[int]:
        return compute_window(
            self.pagination.current_page,
            self.pagination.total_pages,
            self.window_size,
        )
