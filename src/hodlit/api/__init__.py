"""Backend API clients."""

from .auth import AuthClient
from .backtest import BacktestClient, record_list_params
from .envelope import ApiClient
from .watchlist import WatchListClient, normalise_symbol

__all__ = [
    "ApiClient",
    "AuthClient",
    "BacktestClient",
    "WatchListClient",
    "normalise_symbol",
    "record_list_params",
]
