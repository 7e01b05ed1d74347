"""Client-side pre-flight checks run before any network call."""

from __future__ import annotations

import re

from .errors import ApiError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
VERIFICATION_CODE_PATTERN = re.compile(r"^\d{6}$")
MIN_PASSWORD_LENGTH = 8


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email or ""))


def is_strong_password(password: str) -> bool:
    return len(password or "") >= MIN_PASSWORD_LENGTH


def is_valid_verification_code(code: str) -> bool:
    return bool(VERIFICATION_CODE_PATTERN.match(code or ""))


def require_fields(message: str, *values: str | None) -> None:
    """Raise a validation error if any value is empty."""

    if any(not value for value in values):
        raise ApiError.validation(message)


def validate_login_form(email: str, password: str) -> str:
    """Return the normalised email or raise ``ValidationError``."""

    email = (email or "").strip()
    require_fields("email and password are required", email, password)
    if not is_valid_email(email):
        raise ApiError.validation("enter a valid email address")
    return email


def validate_email_field(email: str) -> str:
    email = (email or "").strip()
    require_fields("email is required", email)
    if not is_valid_email(email):
        raise ApiError.validation("enter a valid email address")
    return email


def validate_registration_form(
    email: str,
    password: str,
    confirm_password: str,
    code: str,
) -> str:
    """Run the registration checks in display order and return the email."""

    email = (email or "").strip()
    require_fields("all required fields must be filled in",
                   email, password, confirm_password, code)
    if not is_valid_email(email):
        raise ApiError.validation("enter a valid email address")
    if not is_strong_password(password):
        raise ApiError.validation(
            f"password must be at least {MIN_PASSWORD_LENGTH} characters")
    if password != confirm_password:
        raise ApiError.validation("passwords do not match")
    if not is_valid_verification_code(code):
        raise ApiError.validation("verification code must be 6 digits")
    return email


__all__ = [
    "is_strong_password",
    "is_valid_email",
    "is_valid_verification_code",
    "require_fields",
    "validate_email_field",
    "validate_login_form",
    "validate_registration_form",
]
