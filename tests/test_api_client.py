import pytest
import requests

from hodlit.api import ApiClient
from hodlit.errors import ApiError, ErrorKind

from conftest import BASE_URL


def test_send_returns_data_and_injects_bearer(make_client, replies, logged_in):
    client, http = make_client({("GET", "/api/market/plot"): replies.envelope([])})

    assert client.api.get("/api/market/plot") == []

    call = http.calls[0]
    assert call.url == f"{BASE_URL}/api/market/plot"
    assert call.headers["Authorization"] == "Bearer tok-123"
    assert call.headers["Content-Type"] == "application/json"
    assert call.timeout == 5


def test_caller_headers_override_defaults(make_client, replies, logged_in):
    client, http = make_client({("POST", "/api/x"): replies.envelope({"ok": True})})

    client.api.post("/api/x", headers={"content-type": "text/plain", "X-Trace": "1"})

    headers = {key.lower(): value for key, value in http.calls[0].headers.items()}
    assert headers["content-type"] == "text/plain"
    assert headers["x-trace"] == "1"


def test_missing_token_fails_before_network(make_client):
    client, http = make_client()

    with pytest.raises(ApiError) as info:
        client.api.get("/api/user/info")

    assert info.value.kind is ErrorKind.MISSING_CREDENTIALS
    assert http.calls == []


def test_unauthenticated_call_sends_no_authorization(make_client, replies, logged_in):
    client, http = make_client({("POST", "/api/open"): replies.envelope()})

    client.api.post("/api/open", json={"a": 1}, requires_auth=False)

    assert "Authorization" not in http.calls[0].headers
    assert http.calls[0].json == {"a": 1}


def test_non_zero_code_raises_application_error(make_client, replies, logged_in):
    client, _ = make_client(
        {("GET", "/api/x"): replies.envelope(None, code=7, message="quota exceeded")})

    with pytest.raises(ApiError) as info:
        client.api.get("/api/x")

    assert info.value.kind is ErrorKind.APPLICATION_ERROR
    assert info.value.message == "quota exceeded"


def test_http_error_surfaces_server_message(make_client, replies, logged_in):
    client, _ = make_client(
        {("GET", "/api/x"): replies.envelope(None, code=403, message="forbidden", status_code=403)})

    with pytest.raises(ApiError) as info:
        client.api.get("/api/x")

    assert info.value.kind is ErrorKind.HTTP_ERROR
    assert info.value.message == "forbidden"
    assert info.value.status_code == 403


def test_transport_errors_propagate(make_client, logged_in):
    client, _ = make_client({("GET", "/api/x"): requests.ConnectionError("refused")})

    with pytest.raises(requests.ConnectionError):
        client.api.get("/api/x")


def test_base_url_trailing_slash_is_normalised(store):
    api = ApiClient("http://host:8080/", store, session=object())

    assert api.url_for("api/user/login") == "http://host:8080/api/user/login"
    assert api.url_for("/api/user/login") == "http://host:8080/api/user/login"


def test_close_closes_http_session(make_client):
    client, http = make_client()

    with client:
        pass

    assert http.closed is True
