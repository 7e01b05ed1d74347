"""In-memory cache of the user's watch-list."""

from __future__ import annotations

from typing import Any, Iterator

from .api.watchlist import WatchListClient, normalise_symbol
from .schemas import SymbolEntry


class WatchList:
    """Symbol list kept consistent with the last successful mutation."""

    def __init__(self, client: WatchListClient):
        self._client = client
        self._entries: list[SymbolEntry] = []

    @property
    def entries(self) -> list[SymbolEntry]:
        return list(self._entries)

    def symbols(self) -> list[str]:
        return [entry.symbol for entry in self._entries]

    def refresh(self) -> list[SymbolEntry]:
        self._entries = self._client.list_symbols()
        return self.entries

    def add(self, symbol: str) -> list[SymbolEntry]:
        self._client.add_symbol(symbol)
        return self.refresh()

    def remove(self, symbol: str) -> dict[str, Any]:
        """Delete ``symbol`` remotely, then drop it locally; returns the raw envelope."""

        response = self._client.delete_symbol(symbol)
        key = normalise_symbol(symbol)
        self._entries = [
            entry for entry in self._entries if entry.symbol != key]
        return response

    def __contains__(self, symbol: str) -> bool:
        return symbol.lower() in self.symbols()

    def __iter__(self) -> Iterator[SymbolEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self._entries)
