from decimal import Decimal
from unittest.mock import DEFAULT, patch

import pytest
from streamlit.testing.v1 import AppTest

from infrastructure.api.gateway import GatewayError
from infrastructure.api.sentinel_api import SentinelApi
from infrastructure.storage.credential_store import BrowserCredentialStore
from use_cases.domain_models import Project, ProjectAnalytics, ProjectStats

APP_PATH = "../app.py"

ALPHA = Project(id=7, name="Alpha", secret_key="sk_alpha")


@pytest.fixture(autouse=True)
def plain_http(monkeypatch):
    monkeypatch.delenv("FORCE_HTTPS", raising=False)


@pytest.fixture
def backend():
    with patch.multiple(
        SentinelApi,
        list_projects=DEFAULT,
        get_project_stats=DEFAULT,
        get_project_analytics=DEFAULT,
        get_project_model_analytics=DEFAULT,
        update_project_budget=DEFAULT,
    ) as mocks:
        yield mocks


def _start(page, token=None):
    """Boot app.py headless on `page` with the browser holding `token`."""
    store = BrowserCredentialStore(token)
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.query_params["page"] = page
    return at, store


def _run(at, store):
    with patch("utils.session_manager.BrowserCredentialStore.from_browser", return_value=store):
        at.run()
    assert not at.exception
    return at


def _titles(at):
    return [t.value for t in at.title]


def test_health_check_answers_before_any_session_work(backend):
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.query_params["health"] = "1"
    at.run()

    assert not at.exception
    assert "ok" in at.json[0].value
    assert _titles(at) == []
    backend["list_projects"].assert_not_called()


def test_anonymous_dashboard_visit_lands_on_login_without_fetch(backend):
    at, store = _start("/dashboard")
    _run(at, store)

    assert at.query_params["page"] == "/login"
    assert "🔐 Login" in _titles(at)
    backend["list_projects"].assert_not_called()


def test_signed_in_visitor_is_sent_from_login_to_dashboard(backend):
    backend["list_projects"].return_value = [ALPHA]
    at, store = _start("/login", token="tok")
    _run(at, store)

    assert at.query_params["page"] == "/dashboard"
    assert "Your Projects" in _titles(at)
    backend["list_projects"].assert_called_once()


def test_dashboard_list_failure_ends_session(backend):
    backend["list_projects"].side_effect = GatewayError("Network error")
    at, store = _start("/dashboard", token="tok")
    _run(at, store)

    assert store.get() is None
    assert at.query_params["page"] == "/login"
    assert "🔐 Login" in _titles(at)
    backend["list_projects"].assert_called_once()


def test_dashboard_refetches_only_after_leaving_and_returning(backend):
    backend["list_projects"].return_value = [ALPHA]
    at, store = _start("/dashboard", token="tok")

    _run(at, store)
    assert "Your Projects" in _titles(at)
    assert backend["list_projects"].call_count == 1

    _run(at, store)
    assert backend["list_projects"].call_count == 1

    at.query_params["page"] = "/settings"
    _run(at, store)
    assert "Account Settings" in _titles(at)

    at.query_params["page"] = "/dashboard"
    _run(at, store)
    assert backend["list_projects"].call_count == 2


@patch("ui.render_aggrid")
def test_budget_save_replaces_cached_stats_with_reread(mock_aggrid, backend):
    backend["get_project_stats"].side_effect = [
        ProjectStats(project_name="Alpha", monthly_budget=1000, current_usage=Decimal("250")),
        ProjectStats(project_name="Alpha", monthly_budget=2000, current_usage=Decimal("250")),
    ]
    backend["get_project_analytics"].return_value = ProjectAnalytics(
        total_requests=3, average_cost_per_request=Decimal("0.1")
    )
    backend["get_project_model_analytics"].return_value = []
    at, store = _start("/project/7", token="tok")

    _run(at, store)
    assert "Alpha" in _titles(at)
    assert at.session_state["project_detail"][7].stats.monthly_budget == 1000

    at.text_input(key="budget_input_7").set_value("2000")
    at.button(key="save_budget_7").click()
    _run(at, store)

    backend["update_project_budget"].assert_called_once_with(7, 2000)
    assert at.session_state["project_detail"][7].stats.monthly_budget == 2000
    backend["get_project_analytics"].assert_called_once()


def test_unknown_project_redirects_to_dashboard(backend):
    backend["list_projects"].return_value = []
    at, store = _start("/project/abc", token="tok")
    _run(at, store)

    assert at.query_params["page"] == "/dashboard"
    backend["get_project_stats"].assert_not_called()
