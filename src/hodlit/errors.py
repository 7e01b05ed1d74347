"""Error vocabulary shared by every backend call."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

import requests

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
PREVIEW_LIMIT = 200
GENERIC_FAILURE = "request failed"


class ErrorKind(str, Enum):
    """Stable failure categories a caller can branch on."""

    MISSING_CREDENTIALS = "MissingCredentials"
    NON_JSON_RESPONSE = "NonJsonResponse"
    MALFORMED_JSON = "MalformedJson"
    HTTP_ERROR = "HttpError"
    APPLICATION_ERROR = "ApplicationError"
    VALIDATION_ERROR = "ValidationError"


class ApiError(Exception):
    """Failure raised by the request layer.

    Attributes
    ----------
    kind:
        One of :class:`ErrorKind`.
    message:
        Short, display-ready description.
    status_code:
        Transport status when a response was received.
    payload:
        Parsed response body when one could be decoded.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        status_code: int | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def __repr__(self) -> str:
        return f"ApiError(kind={self.kind.value!r}, message={self.message!r}, status_code={self.status_code!r})"

    @classmethod
    def missing_credentials(cls, message: str = "missing authentication token") -> "ApiError":
        return cls(ErrorKind.MISSING_CREDENTIALS, message)

    @classmethod
    def non_json_response(cls, status_code: int, preview: str) -> "ApiError":
        return cls(
            ErrorKind.NON_JSON_RESPONSE,
            f"server returned a non-JSON response ({status_code}): {preview}",
            status_code=status_code,
        )

    @classmethod
    def malformed_json(cls, status_code: int, reason: str = "unable to parse server response as JSON") -> "ApiError":
        return cls(ErrorKind.MALFORMED_JSON, reason, status_code=status_code)

    @classmethod
    def http_error(cls, status_code: int, message: str | None = None, payload: Any = None) -> "ApiError":
        return cls(
            ErrorKind.HTTP_ERROR,
            message or f"{GENERIC_FAILURE}: {status_code}",
            status_code=status_code,
            payload=payload,
        )

    @classmethod
    def application_error(cls, message: str | None, *, status_code: int | None = None, payload: Any = None) -> "ApiError":
        return cls(
            ErrorKind.APPLICATION_ERROR,
            message or GENERIC_FAILURE,
            status_code=status_code,
            payload=payload,
        )

    @classmethod
    def validation(cls, message: str) -> "ApiError":
        return cls(ErrorKind.VALIDATION_ERROR, message)


def is_json_response(response: requests.Response) -> bool:
    content_type = response.headers.get("Content-Type") or ""
    return JSON_MEDIA_TYPE in content_type.lower()


def body_preview(response: requests.Response, limit: int = PREVIEW_LIMIT) -> str:
    """Return at most ``limit`` characters of the response body."""

    return (response.text or "")[:limit]


def _message_of(payload: dict) -> str | None:
    message = payload.get("message")
    if message is None or message == "":
        return None
    return str(message)


def classify_response(response: requests.Response) -> tuple[ApiError | None, Any]:
    """Inspect ``response`` and return ``(error, payload)``.

    The first matching rule wins, checked in order: non-JSON content type,
    unparseable body, non-2xx status, non-zero envelope ``code``. When none
    applies the error is ``None`` and ``payload`` is the decoded envelope.
    """

    status = response.status_code
    if not is_json_response(response):
        preview = body_preview(response)
        logger.warning("Non-JSON response (%s): %s", status, preview)
        return ApiError.non_json_response(status, preview), None

    try:
        payload = response.json()
    except ValueError:
        logger.warning("Unparseable JSON response (%s): %s",
                       status, body_preview(response))
        return ApiError.malformed_json(status), None
    if not isinstance(payload, dict):
        return ApiError.malformed_json(status, "server response is not a JSON object"), None

    if not 200 <= status < 300:
        return ApiError.http_error(status, _message_of(payload), payload), payload

    if payload.get("code") != 0:
        return ApiError.application_error(_message_of(payload), status_code=status, payload=payload), payload

    return None, payload


def raise_for_envelope(response: requests.Response) -> dict:
    """Return the decoded envelope or raise the classified :class:`ApiError`."""

    error, payload = classify_response(response)
    if error is not None:
        raise error
    return payload


__all__ = [
    "ApiError",
    "ErrorKind",
    "JSON_MEDIA_TYPE",
    "PREVIEW_LIMIT",
    "body_preview",
    "classify_response",
    "is_json_response",
    "raise_for_envelope",
]
