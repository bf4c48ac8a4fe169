import pytest
from unittest.mock import MagicMock

import auth
from infrastructure.api.gateway import GatewayError
from infrastructure.storage.credential_store import InMemoryCredentialStore
from use_cases import auth_flow, routes
from utils.session_manager import SessionController


@pytest.fixture
def api():
    api = MagicMock()
    api.authenticate.return_value = "fresh-token"
    return api


@pytest.fixture
def store():
    return InMemoryCredentialStore()


@pytest.fixture
def controller(api, store):
    controller = SessionController(store, lambda email, password: auth.authenticate_user(api, email, password))
    controller.initialize()
    return controller


def test_sign_up_creates_account_then_logs_in(api, controller, store):
    outcome = auth_flow.sign_up(api, controller, " new@b.c ", "password1", "password1")

    api.create_account.assert_called_once_with("new@b.c", "password1")
    api.authenticate.assert_called_once_with("new@b.c", "password1")
    assert store.get() == "fresh-token"
    assert outcome.route == routes.DASHBOARD


def test_sign_up_duplicate_email_does_not_log_in(api, controller, store):
    api.create_account.side_effect = GatewayError("dup", status_code=400)

    with pytest.raises(auth.UserAlreadyExistsError):
        auth_flow.sign_up(api, controller, "taken@b.c", "password1", "password1")

    api.authenticate.assert_not_called()
    assert store.get() is None
    assert controller.current().status == "UNAUTHENTICATED"


def test_delete_account_logs_out(api, controller, store):
    controller.login("a@b.c", "password1")

    result = auth_flow.delete_account(api, controller)

    assert result.status == "DELETED"
    assert result.outcome.route == routes.LOGIN
    assert store.get() is None
    api.delete_current_user.assert_called_once()


def test_delete_account_failure_keeps_session(api, controller, store):
    controller.login("a@b.c", "password1")
    api.delete_current_user.side_effect = GatewayError("boom", status_code=500)

    result = auth_flow.delete_account(api, controller)

    assert result.status == "FAILED"
    assert result.outcome is None
    assert store.get() == "fresh-token"
    assert controller.current().status == "AUTHENTICATED"
