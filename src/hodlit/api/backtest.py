"""Backtest record endpoints."""

from __future__ import annotations

from typing import Optional

from ..pagination import build_pagination
from ..schemas import BacktestDetail, BacktestPage, PaginationInfo
from ..validation import require_fields
from .envelope import ApiClient

RECORD_LIST_ENDPOINT = "/api/plot/backtest/record/list"
RECORD_DETAIL_ENDPOINT = "/api/plot/backtest/record/detail"
DEFAULT_PAGE_SIZE = 10


def record_list_params(
        page: int,
        page_size: int,
        symbol: Optional[str] = None,
        status: Optional[int] = None,
) -> dict[str, str]:
    """Query parameters for the record list; unset filters are omitted."""

    params = {"page": str(page), "page_size": str(page_size)}
    if symbol:
        params["symbol"] = symbol
    if status is not None:
        params["status"] = str(int(status))
    return params


class BacktestClient:
    """Browse backtest execution records."""

    def __init__(self, api: ApiClient):
        self._api = api

    def list_records(
            self,
            page: int = 1,
            page_size: int = DEFAULT_PAGE_SIZE,
            symbol: Optional[str] = None,
            status: Optional[int] = None,
    ) -> BacktestPage:
        """Fetch one page of records.

        A payload without a ``records`` key yields an empty page whose
        pagination is reset to the requested page with zero totals. Missing
        pagination alongside records gets the same reset; pagination without
        ``total_pages`` has it derived from ``total_count``.
        """

        data = self._api.get(
            RECORD_LIST_ENDPOINT,
            params=record_list_params(page, page_size, symbol, status),
        )
        if not isinstance(data, dict) or data.get("records") is None:
            return BacktestPage.empty(page, page_size)
        pagination = data.get("pagination")
        if not pagination:
            pagination = PaginationInfo.empty(page, page_size)
        elif "total_pages" not in pagination:
            pagination = build_pagination(
                pagination.get("current_page", page),
                pagination.get("page_size", page_size),
                pagination.get("total_count", 0),
            )
        data = {**data, "pagination": pagination}
        return BacktestPage.model_validate(data)

    def get_detail(self, symbol: str, record_id: Optional[str] = None) -> BacktestDetail:
        """Fetch one record's detail; missing data yields an empty detail."""

        require_fields("symbol is required", symbol)
        params = {"symbol": symbol}
        if record_id:
            params["id"] = str(record_id)
        data = self._api.get(RECORD_DETAIL_ENDPOINT, params=params)
        return BacktestDetail.model_validate(data or {})


__all__ = [
    "BacktestClient",
    "DEFAULT_PAGE_SIZE",
    "RECORD_DETAIL_ENDPOINT",
    "RECORD_LIST_ENDPOINT",
    "record_list_params",
]
