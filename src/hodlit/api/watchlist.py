"""Symbol watch-list endpoints."""

from __future__ import annotations

from typing import Any

from ..errors import raise_for_envelope
from ..schemas import SymbolEntry
from ..validation import require_fields
from .envelope import ApiClient

PLOT_ENDPOINT = "/api/market/plot"


def normalise_symbol(symbol: str) -> str:
    """Return the lowercase wire form of ``symbol``; empty input is rejected."""

    symbol = (symbol or "").strip()
    require_fields("symbol is required", symbol)
    return symbol.lower()


class WatchListClient:
    """List, add and delete the user's tracked symbols."""

    def __init__(self, api: ApiClient):
        self._api = api

    def list_symbols(self) -> list[SymbolEntry]:
        data = self._api.get(PLOT_ENDPOINT)
        return [SymbolEntry.model_validate(item) for item in data or []]

    def add_symbol(self, symbol: str) -> None:
        self._api.post(PLOT_ENDPOINT, json={"symbol": normalise_symbol(symbol)})

    def delete_symbol(self, symbol: str) -> dict[str, Any]:
        """Delete ``symbol`` and return the full response envelope.

        Unlike the other calls this returns ``{code, message, data}`` rather
        than ``data`` so the raw server answer can be shown to the user.
        A missing token fails before anything is sent.
        """

        body = {"symbol": normalise_symbol(symbol)}
        headers = self._api.build_headers(requires_auth=True)
        response = self._api.dispatch(
            "DELETE", PLOT_ENDPOINT, headers=headers, json=body)
        return raise_for_envelope(response)


__all__ = ["PLOT_ENDPOINT", "WatchListClient", "normalise_symbol"]
