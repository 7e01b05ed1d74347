"""Authenticated request wrapper that unwraps the backend envelope."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import requests
from requests.structures import CaseInsensitiveDict

from ..errors import JSON_MEDIA_TYPE, ApiError, raise_for_envelope
from ..schemas import Envelope
from ..session import SessionStore

logger = logging.getLogger(__name__)

DEFAULT_HEADERS: Mapping[str, str] = {"Content-Type": JSON_MEDIA_TYPE}


class ApiClient:
    """Thin wrapper around the backend HTTP API.

    Every call goes through :meth:`send`, which injects the bearer token,
    classifies failures and returns the envelope's ``data``. No retries are
    attempted here.
    """

    def __init__(
            self,
            base_url: str,
            store: SessionStore,
            *,
            session: Optional[requests.Session] = None,
            timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.store = store
        self.session = session or requests.Session()
        self.timeout = timeout

    def close(self) -> None:
        self.session.close()

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def build_headers(
            self,
            headers: Optional[Mapping[str, str]] = None,
            *,
            requires_auth: bool = True,
    ) -> CaseInsensitiveDict:
        """Merge default and caller headers, adding ``Authorization`` when needed.

        Raises :class:`ApiError` of kind ``MissingCredentials`` when
        ``requires_auth`` is set and no valid session token exists.
        """

        merged: CaseInsensitiveDict = CaseInsensitiveDict(DEFAULT_HEADERS)
        merged.update(headers or {})
        if requires_auth:
            token = self.store.token()
            if not token:
                raise ApiError.missing_credentials()
            merged["Authorization"] = f"Bearer {token}"
        return merged

    def dispatch(
            self,
            method: str,
            endpoint: str,
            *,
            headers: CaseInsensitiveDict,
            params: Optional[Mapping[str, Any]] = None,
            json: Any = None,
    ) -> requests.Response:
        url = self.url_for(endpoint)
        logger.debug("%s %s (body=%s, auth=%s)", method, url,
                     json is not None, "Authorization" in headers)
        return self.session.request(
            method,
            url,
            params=dict(params) if params else None,
            json=json,
            headers=dict(headers),
            timeout=self.timeout,
        )

    def send(
            self,
            endpoint: str,
            *,
            method: str = "GET",
            params: Optional[Mapping[str, Any]] = None,
            json: Any = None,
            headers: Optional[Mapping[str, str]] = None,
            requires_auth: bool = True,
    ) -> Any:
        """Issue one call and return the envelope ``data``."""

        merged = self.build_headers(headers, requires_auth=requires_auth)
        response = self.dispatch(
            method, endpoint, headers=merged, params=params, json=json)
        payload = raise_for_envelope(response)
        return Envelope[Any].model_validate(payload).data

    def get(self, endpoint: str, **kwargs: Any) -> Any:
        return self.send(endpoint, method="GET", **kwargs)

    def post(self, endpoint: str, **kwargs: Any) -> Any:
        return self.send(endpoint, method="POST", **kwargs)

    def delete(self, endpoint: str, **kwargs: Any) -> Any:
        return self.send(endpoint, method="DELETE", **kwargs)


__all__ = ["ApiClient", "DEFAULT_HEADERS"]
