"""Page-window arithmetic for paginated record sets."""

from __future__ import annotations

from math import ceil

from .schemas import PaginationInfo

DEFAULT_WINDOW_SIZE = 5


def compute_window(current_page: int, total_pages: int, window_size: int = DEFAULT_WINDOW_SIZE) -> list[int]:
    """Return the contiguous page numbers to expose as controls.

    The window starts two pages before ``current_page`` and is shifted left
    near the last page so it stays full whenever enough pages exist.
    """

    start = max(1, current_page - 2)
    end = min(total_pages, start + window_size - 1)
    if end - start < window_size - 1 and total_pages > window_size - 1:
        start = max(1, end - window_size + 1)
    return list(range(start, end + 1))


def validate_transition(requested_page: int, total_pages: int) -> int | None:
    """Return ``requested_page`` if it is within bounds, otherwise ``None``."""

    if requested_page < 1 or requested_page > total_pages:
        return None
    return requested_page


def total_pages_for(total_count: int, page_size: int) -> int:
    if page_size <= 0:
        return 0
    return int(ceil(total_count / page_size))


def build_pagination(current_page: int, page_size: int, total_count: int) -> PaginationInfo:
    """Derive a :class:`PaginationInfo` with ``current_page`` clamped into range."""

    total_pages = total_pages_for(total_count, page_size)
    current = min(max(current_page, 1), max(total_pages, 1))
    return PaginationInfo(
        current_page=current,
        page_size=page_size,
        total_count=total_count,
        total_pages=total_pages,
    )


__all__ = [
    "DEFAULT_WINDOW_SIZE",
    "build_pagination",
    "compute_window",
    "total_pages_for",
    "validate_transition",
]
