import pytest

from hodlit.errors import ApiError, ErrorKind
from hodlit.validation import (
    is_strong_password,
    is_valid_email,
    is_valid_verification_code,
    validate_email_field,
    validate_login_form,
    validate_registration_form,
)


def test_email_format():
    assert is_valid_email("trader@example.com")
    assert not is_valid_email("trader@example")
    assert not is_valid_email("trader example@x.io")
    assert not is_valid_email("")


def test_password_strength():
    assert is_strong_password("12345678")
    assert not is_strong_password("1234567")


def test_verification_code():
    assert is_valid_verification_code("042517")
    assert not is_valid_verification_code("42517")
    assert not is_valid_verification_code("12a456")


def test_login_form_strips_email():
    assert validate_login_form("  a@b.co ", "secret") == "a@b.co"


def test_login_form_rejects_malformed_email():
    with pytest.raises(ApiError) as info:
        validate_login_form("nope", "secret")

    assert info.value.kind is ErrorKind.VALIDATION_ERROR


def test_email_field_required():
    with pytest.raises(ApiError):
        validate_email_field("")


@pytest.mark.parametrize(
    "email, password, confirm, code, message",
    [
        ("", "longpassword", "longpassword", "123456", "required"),
        ("bad", "longpassword", "longpassword", "123456", "email"),
        ("a@b.co", "short", "short", "123456", "at least 8"),
        ("a@b.co", "longpassword", "different1", "123456", "do not match"),
        ("a@b.co", "longpassword", "longpassword", "12345x", "6 digits"),
    ],
)
def test_registration_form_errors(email, password, confirm, code, message):
    with pytest.raises(ApiError) as info:
        validate_registration_form(email, password, confirm, code)

    assert info.value.kind is ErrorKind.VALIDATION_ERROR
    assert message in info.value.message


def test_registration_form_accepts_valid_input():
    assert validate_registration_form("a@b.co", "longpassword", "longpassword", "123456") == "a@b.co"
