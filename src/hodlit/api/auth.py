"""Account endpoints: login, registration, profile and logout."""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import ValidationError

from ..errors import ApiError
from ..schemas import LoginResult, UserDetails
from ..session import Session, SessionStore
from ..validation import require_fields
from .envelope import ApiClient

logger = logging.getLogger(__name__)

LOGIN_ENDPOINT = "/api/user/login"
REGISTER_ENDPOINT = "/api/user/register"
VERIFICATION_CODE_ENDPOINT = "/api/user/verification_code"
USER_INFO_ENDPOINT = "/api/user/info"
LOGOUT_ENDPOINT = "/api/user/logout"


class AuthClient:
    """Login lifecycle on top of :class:`ApiClient`."""

    def __init__(self, api: ApiClient):
        self._api = api

    @property
    def store(self) -> SessionStore:
        return self._api.store

    def login(self, email: str, password: str) -> LoginResult:
        """Authenticate and persist the resulting session.

        The backend does not echo the email, so the caller-supplied value is
        stored alongside the token.
        """

        require_fields("email and password are required", email, password)
        data = self._api.post(
            LOGIN_ENDPOINT,
            json={"email": email, "password": password},
            requires_auth=False,
        )
        try:
            result = LoginResult.model_validate(data)
        except ValidationError as exc:
            raise ApiError.application_error(
                "login response is missing session fields", payload=data) from exc

        self.store.save(
            Session(
                user_id=result.user_id,
                email=email,
                token=result.token,
                expires_at=result.expires_at,
            )
        )
        logger.info("Logged in as %s", email)
        return result

    def register(self, email: str, password: str, code: str, invite_code: str = "") -> Any:
        require_fields("all required fields must be filled in",
                       email, password, code)
        return self._api.post(
            REGISTER_ENDPOINT,
            json={
                "email": email,
                "password": password,
                "code": code,
                "invite_code": invite_code,
            },
            requires_auth=False,
        )

    def request_verification_code(self, email: str) -> Any:
        require_fields("email is required", email)
        return self._api.post(
            VERIFICATION_CODE_ENDPOINT,
            json={"email": email},
            requires_auth=False,
        )

    def fetch_current_user(self) -> UserDetails:
        """Return the current user's profile.

        Any failure means the session can no longer be trusted: the local
        session is cleared before the error propagates, and callers should
        send the user back to login.
        """

        try:
            data = self._api.get(USER_INFO_ENDPOINT)
            try:
                return UserDetails.model_validate(data)
            except ValidationError as exc:
                raise ApiError.application_error(
                    "user details are malformed", payload=data) from exc
        except (ApiError, requests.RequestException):
            logger.warning("Fetching user details failed; clearing session")
            self.store.clear()
            raise

    def logout(self) -> None:
        """End the session remotely; the local session is cleared regardless."""

        try:
            self._api.post(LOGOUT_ENDPOINT)
        finally:
            self.store.clear()
            logger.info("Local session cleared")

    def is_logged_in(self) -> bool:
        return self.store.is_valid()


__all__ = ["AuthClient"]
