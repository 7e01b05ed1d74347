import pytest

from hodlit.errors import (
    ApiError,
    ErrorKind,
    PREVIEW_LIMIT,
    classify_response,
    raise_for_envelope,
)

from conftest import DummyResponse


def test_non_json_content_type_wins_over_status():
    response = DummyResponse(502, text="<html>" + "x" * 500, content_type="text/html")

    error, payload = classify_response(response)

    assert error.kind is ErrorKind.NON_JSON_RESPONSE
    assert payload is None
    assert "<html>" in error.message
    assert "x" * PREVIEW_LIMIT not in error.message
    assert error.status_code == 502


def test_missing_content_type_is_non_json():
    error, _ = classify_response(DummyResponse(200, {"code": 0}, content_type=None))

    assert error.kind is ErrorKind.NON_JSON_RESPONSE


def test_json_with_charset_is_accepted():
    response = DummyResponse(200, {"code": 0, "data": 1},
                             content_type="application/json; charset=utf-8")

    assert classify_response(response) == (None, {"code": 0, "data": 1})


def test_malformed_json_body():
    error, _ = classify_response(DummyResponse(200, text="{oops"))

    assert error.kind is ErrorKind.MALFORMED_JSON


def test_non_object_json_is_malformed():
    error, _ = classify_response(DummyResponse(200, [1, 2, 3]))

    assert error.kind is ErrorKind.MALFORMED_JSON


def test_http_error_uses_server_message():
    response = DummyResponse(401, {"code": 401, "message": "token expired"})

    error, payload = classify_response(response)

    assert error.kind is ErrorKind.HTTP_ERROR
    assert error.message == "token expired"
    assert payload["code"] == 401


def test_http_error_falls_back_to_generic_message():
    error, _ = classify_response(DummyResponse(500, {"code": 1}))

    assert error.kind is ErrorKind.HTTP_ERROR
    assert error.message == "request failed: 500"


def test_non_zero_code_on_2xx_is_application_error():
    error, _ = classify_response(DummyResponse(200, {"code": 1003, "message": "symbol exists"}))

    assert error.kind is ErrorKind.APPLICATION_ERROR
    assert error.message == "symbol exists"


def test_missing_code_is_application_error_with_generic_message():
    error, _ = classify_response(DummyResponse(200, {"data": {}}))

    assert error.kind is ErrorKind.APPLICATION_ERROR
    assert error.message == "request failed"


def test_raise_for_envelope_returns_payload_on_success():
    payload = {"code": 0, "message": "ok", "data": {"a": 1}}

    assert raise_for_envelope(DummyResponse(200, payload)) == payload


def test_raise_for_envelope_raises_classified_error():
    with pytest.raises(ApiError) as info:
        raise_for_envelope(DummyResponse(200, {"code": 2, "message": "nope"}))

    assert info.value.kind is ErrorKind.APPLICATION_ERROR
    assert str(info.value) == "nope"
