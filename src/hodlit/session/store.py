"""Persisted login session and its validity rules."""

from __future__ import annotations

import logging
import time
from typing import Callable

from pydantic import BaseModel, ConfigDict, ValidationError

from .backends import SessionBackend

logger = logging.getLogger(__name__)

SESSION_KEY = "user_info"


class Session(BaseModel):
    """Client-held proof of authentication.

    ``expires_at`` is in epoch seconds; ``None`` or ``0`` means the backend
    did not report an expiry and the token is trusted until cleared.
    """

    user_id: str
    email: str | None = None
    token: str
    expires_at: float | None = None

    model_config = ConfigDict(coerce_numbers_to_str=True)

    def is_expired(self, now: float) -> bool:
        if not self.expires_at:
            return False
        return self.expires_at <= now


class SessionStore:
    """Owns the single persisted :class:`Session` record."""

    def __init__(
        self,
        backend: SessionBackend,
        *,
        key: str = SESSION_KEY,
        clock: Callable[[], float] = time.time,
    ):
        self.backend = backend
        self.key = key
        self._clock = clock

    def save(self, session: Session) -> None:
        self.backend.set(self.key, session.model_dump_json())

    def load(self) -> Session | None:
        """Return the persisted session, or ``None`` if missing or unreadable."""

        try:
            raw = self.backend.get(self.key)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Unable to read session record: %s", exc)
            return None
        if raw is None:
            return None
        try:
            return Session.model_validate_json(raw)
        except ValidationError:
            logger.warning("Discarding unreadable session record")
            return None

    def is_valid(self) -> bool:
        """Return whether a usable session exists; expired records are deleted."""

        session = self.load()
        if session is None or not session.token:
            return False
        if session.is_expired(self._clock()):
            logger.info("Session for user %s expired", session.user_id)
            self.clear()
            return False
        return True

    def token(self) -> str | None:
        """Bearer token of the current valid session."""

        if not self.is_valid():
            return None
        session = self.load()
        return session.token if session else None

    def clear(self) -> None:
        try:
            self.backend.delete(self.key)
        except OSError as exc:
            logger.warning("Unable to delete session record: %s", exc)


__all__ = ["SESSION_KEY", "Session", "SessionStore"]
