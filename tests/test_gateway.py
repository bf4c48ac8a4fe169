import pytest
import requests
from unittest.mock import patch, MagicMock

from infrastructure.api.gateway import ApiGateway, GatewayError
from infrastructure.storage.credential_store import InMemoryCredentialStore


def _response(status_code=200, body=None, text=""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = b"x" if body is not None else b""
    resp.json.return_value = body
    resp.text = text
    return resp


@pytest.fixture
def store():
    return InMemoryCredentialStore()


@pytest.fixture
def gateway(store):
    return ApiGateway("http://api.test/", store)


@patch("requests.Session.request")
def test_attaches_bearer_token_when_present(mock_request, gateway, store):
    store.set("tok-123")
    mock_request.return_value = _response(body=[])

    gateway.get("/projects")

    args, kwargs = mock_request.call_args
    assert args == ("GET", "http://api.test/projects")
    assert kwargs["headers"]["Authorization"] == "Bearer tok-123"


@patch("requests.Session.request")
def test_dispatches_unauthenticated_without_token(mock_request, gateway):
    mock_request.return_value = _response(body={"access_token": "t"})

    gateway.post("/auth/token", data={"username": "a", "password": "b"})

    kwargs = mock_request.call_args[1]
    assert "Authorization" not in kwargs["headers"]
    assert kwargs["data"] == {"username": "a", "password": "b"}


@patch("requests.Session.request")
def test_token_is_read_per_request(mock_request, gateway, store):
    mock_request.return_value = _response(body={})
    store.set("first")
    gateway.get("/a")
    store.clear()
    gateway.get("/b")

    first, second = mock_request.call_args_list
    assert first[1]["headers"]["Authorization"] == "Bearer first"
    assert "Authorization" not in second[1]["headers"]


@patch("requests.Session.request")
def test_non_2xx_raises_with_status_and_detail(mock_request, gateway):
    mock_request.return_value = _response(status_code=401, body={"detail": "Not authenticated"})

    with pytest.raises(GatewayError) as exc:
        gateway.get("/projects")

    assert exc.value.status_code == 401
    assert exc.value.detail == "Not authenticated"


@patch("requests.Session.request")
def test_transport_failure_is_single_attempt(mock_request, gateway):
    mock_request.side_effect = requests.ConnectionError("refused")

    with pytest.raises(GatewayError) as exc:
        gateway.get("/projects")

    assert exc.value.status_code is None
    assert mock_request.call_count == 1


@patch("requests.Session.request")
def test_empty_body_returns_none(mock_request, gateway):
    mock_request.return_value = _response(status_code=204)
    assert gateway.delete("/projects/3") is None


@patch("requests.Session.request")
def test_no_timeout_by_default(mock_request, gateway):
    mock_request.return_value = _response(body={})
    gateway.get("/x")
    assert mock_request.call_args[1]["timeout"] is None


@patch("requests.Session.request")
def test_calls_are_not_cached(mock_request, gateway):
    mock_request.return_value = _response(body=[])
    gateway.get("/projects")
    gateway.get("/projects")
    assert mock_request.call_count == 2
