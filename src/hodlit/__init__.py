"""Client library for the hodlit trading-signal backend."""

from importlib.metadata import version

__all__ = ["__version__"]

try:
    __version__ = version("hodlit")
except Exception:  # pragma: no cover - package not installed in dev mode yet.
    __version__ = "0.0.0"
