"""Typed records for backend payloads."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar, Generic, Iterable, TypeVar

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """``{code, message, data}`` wrapper present on every backend response."""

    code: int
    message: str | None = ""
    data: T | None = None

    model_config = ConfigDict(extra="allow")


class LoginResult(BaseModel):
    user_id: str
    token: str
    expires_at: float | None = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class UserDetails(BaseModel):
    """Current user profile; only ``email`` is guaranteed."""

    email: str

    model_config = ConfigDict(extra="allow")


class SymbolEntry(BaseModel):
    symbol: str
    is_valid: bool = False
    create_ts: int = 0

    model_config = ConfigDict(str_strip_whitespace=True)


class BacktestStatus(IntEnum):
    """Lifecycle of one backtest trade cycle."""

    PENDING_BUY = 0
    BOUGHT = 1
    BUY_FAILED = 2
    PENDING_SELL = 3
    SOLD = 4
    SELL_FAILED_MARKET_SOLD = 5

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


STATUS_LABELS: dict[BacktestStatus, str] = {
    BacktestStatus.PENDING_BUY: "buy order pending",
    BacktestStatus.BOUGHT: "bought, awaiting sell",
    BacktestStatus.BUY_FAILED: "buy failed",
    BacktestStatus.PENDING_SELL: "sell order pending",
    BacktestStatus.SOLD: "sold",
    BacktestStatus.SELL_FAILED_MARKET_SOLD: "sell order failed, sold at market",
}
UNKNOWN_STATUS_LABEL = "unknown status"


def status_text(status: int | None) -> str:
    """Return the display label for a raw status code."""

    try:
        return BacktestStatus(status).label
    except ValueError:
        return UNKNOWN_STATUS_LABEL


class BacktestRecord(BaseModel):
    """Immutable snapshot of one trade cycle."""

    id: str = ""
    symbol: str = ""
    buy_price: str | None = None
    buy_ts: int | None = None
    sell_price: str | None = None
    sell_ts: int | None = None
    hold_time: int | None = None
    profit_percent: str | None = None
    status: int | None = None
    status_text: str | None = None

    model_config = ConfigDict(
        frozen=True, extra="allow", coerce_numbers_to_str=True)


class BacktestDetail(BacktestRecord):
    """Record fields plus the bid/ask legs; every field is optional."""

    bid_curr_price: str | None = None
    bid_price: str | None = None
    bid_ts: int | None = None
    bid_plot_type: int | None = None
    bid_plot_msg: str | None = None
    ask_curr_price: str | None = None
    ask_price: str | None = None
    ask_ts: int | None = None
    ask_plot_type: int | None = None
    ask_plot_msg: str | None = None


class PaginationInfo(BaseModel):
    current_page: int = Field(1, ge=0)
    page_size: int = Field(10, ge=0)
    total_count: int = Field(0, ge=0)
    total_pages: int = Field(0, ge=0)

    @classmethod
    def empty(cls, page: int, page_size: int) -> "PaginationInfo":
        """Pagination reset to ``page`` with zero totals."""

        return cls(current_page=page, page_size=page_size, total_count=0, total_pages=0)


class BacktestPage(BaseModel):
    records: list[BacktestRecord] = Field(default_factory=list)
    pagination: PaginationInfo = Field(default_factory=PaginationInfo)

    @classmethod
    def empty(cls, page: int, page_size: int) -> "BacktestPage":
        return cls(records=[], pagination=PaginationInfo.empty(page, page_size))


BACKTEST_RECORD_COLUMNS: tuple[str, ...] = (
    "id",
    "symbol",
    "buy_price",
    "buy_time",
    "sell_price",
    "sell_time",
    "hold_time",
    "profit_percent",
    "status",
)


def _to_datetime(value: int | None) -> pd.Timestamp | None:
    if not value:
        return None
    return pd.Timestamp(value, unit="s", tz="UTC")


@dataclass(slots=True)
class BacktestRecordFrame:
    """Helper to build tabular views of :class:`BacktestRecord` lists."""

    columns: ClassVar[tuple[str, ...]] = BACKTEST_RECORD_COLUMNS

    @classmethod
    def from_records(cls, records: Iterable[BacktestRecord]) -> pd.DataFrame:
        """Convert records to a DataFrame with readable timestamps and status labels."""

        rows: list[dict[str, Any]] = []
        for record in records:
            rows.append(
                {
                    "id": record.id,
                    "symbol": record.symbol.upper(),
                    "buy_price": record.buy_price,
                    "buy_time": _to_datetime(record.buy_ts),
                    "sell_price": record.sell_price,
                    "sell_time": _to_datetime(record.sell_ts),
                    "hold_time": record.hold_time,
                    "profit_percent": record.profit_percent,
                    "status": record.status_text or status_text(record.status),
                }
            )
        return pd.DataFrame(rows, columns=cls.columns)


__all__ = [
    "BACKTEST_RECORD_COLUMNS",
    "BacktestDetail",
    "BacktestPage",
    "BacktestRecord",
    "BacktestRecordFrame",
    "BacktestStatus",
    "Envelope",
    "LoginResult",
    "PaginationInfo",
    "STATUS_LABELS",
    "SymbolEntry",
    "UNKNOWN_STATUS_LABEL",
    "UserDetails",
    "status_text",
]
