"""Top-level client wiring configuration, session storage and API clients."""

from __future__ import annotations

from typing import Optional

import requests

from .api import ApiClient, AuthClient, BacktestClient, WatchListClient
from .browser import RecordBrowser
from .config import AppSettings
from .session import FileSessionBackend, SessionStore
from .watchlist import WatchList


class HodlClient:
    """Bundle of resource clients sharing one HTTP session and session store."""

    def __init__(self, api: ApiClient):
        self.api = api
        self.auth = AuthClient(api)
        self.symbols = WatchListClient(api)
        self.backtest = BacktestClient(api)

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings | None = None,
        *,
        session: Optional[requests.Session] = None,
    ) -> "HodlClient":
        settings = settings or AppSettings()
        store = SessionStore(FileSessionBackend(settings.session_dir))
        api = ApiClient(
            settings.api_base_url,
            store,
            session=session,
            timeout=settings.request_timeout,
        )
        return cls(api)

    @property
    def store(self) -> SessionStore:
        return self.api.store

    def watchlist(self) -> WatchList:
        return WatchList(self.symbols)

    def record_browser(self, page_size: int = 10) -> RecordBrowser:
        return RecordBrowser(self.backtest, page_size=page_size)

    def close(self) -> None:
        self.api.close()

    def __enter__(self) -> "HodlClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
