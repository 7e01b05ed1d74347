"""Session persistence for the hodlit client."""

from .backends import FileSessionBackend, MemorySessionBackend, SessionBackend
from .store import SESSION_KEY, Session, SessionStore

__all__ = [
    "FileSessionBackend",
    "MemorySessionBackend",
    "SESSION_KEY",
    "Session",
    "SessionBackend",
    "SessionStore",
]
