import pytest
from decimal import Decimal
from unittest.mock import MagicMock

from infrastructure.api.sentinel_api import SentinelApi


@pytest.fixture
def gateway():
    return MagicMock()


@pytest.fixture
def api(gateway):
    return SentinelApi(gateway)


def test_authenticate_uses_form_encoded_username(api, gateway):
    gateway.post.return_value = {"access_token": "tok", "token_type": "bearer"}

    assert api.authenticate("a@b.c", "pw") == "tok"
    gateway.post.assert_called_once_with("/auth/token", data={"username": "a@b.c", "password": "pw"})


def test_authenticate_without_token_raises(api, gateway):
    gateway.post.return_value = {}
    with pytest.raises(ValueError):
        api.authenticate("a@b.c", "pw")


def test_list_projects_maps_sentinel_key(api, gateway):
    gateway.get.return_value = [{"id": 1, "name": "Foo", "sentinel_key": "sk_1"}]

    projects = api.list_projects()

    assert projects[0].id == 1
    assert projects[0].secret_key == "sk_1"
    gateway.get.assert_called_once_with("/projects")


def test_create_and_delete_project_paths(api, gateway):
    gateway.post.return_value = {"id": 9, "name": "New", "sentinel_key": "sk_9"}

    project = api.create_project("New")
    api.delete_project(9)

    assert project.id == 9
    gateway.post.assert_called_once_with("/projects", json={"name": "New"})
    gateway.delete.assert_called_once_with("/projects/9")


def test_stats_and_budget_paths(api, gateway):
    gateway.get.return_value = {"project_name": "Foo", "monthly_budget": 1000, "current_usage": 250.5}

    stats = api.get_project_stats(4)
    api.update_project_budget(4, 2000)

    assert stats.current_usage == Decimal("250.5")
    gateway.get.assert_called_once_with("/v1/projects/4/stats")
    gateway.put.assert_called_once_with("/v1/projects/4/budget", json={"monthly_budget": 2000})


def test_model_analytics(api, gateway):
    gateway.get.return_value = [{"model": "gpt-4o", "requests": 3, "cost": 1.2}]

    rows = api.get_project_model_analytics(2)

    assert rows[0].model == "gpt-4o"
    assert rows[0].requests == 3
    gateway.get.assert_called_once_with("/v1/projects/2/analytics/models")


def test_delete_current_user(api, gateway):
    api.delete_current_user()
    gateway.delete.assert_called_once_with("/users/me")


def test_list_projects_rejects_object_body(api, gateway):
    gateway.get.return_value = {"detail": "oops"}
    with pytest.raises(ValueError):
        api.list_projects()


def test_authenticate_with_list_body_raises_value_error(api, gateway):
    gateway.post.return_value = ["not", "a", "token"]
    with pytest.raises(ValueError):
        api.authenticate("a@b.c", "pw")
