from typing import Any, List

from infrastructure.api.gateway import ApiGateway
from use_cases.domain_models import ModelUsage, Project, ProjectAnalytics, ProjectStats


def _rows(payload: Any, path: str) -> List[Any]:
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ValueError(f"{path} returned {type(payload).__name__}, expected a list")
    return payload


def _field(payload: Any, key: str) -> str:
    if not isinstance(payload, dict):
        return ""
    return payload.get(key) or ""


class SentinelApi:
    """Typed wrapper over the metering backend. All calls go through the gateway."""

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    # --- auth (unauthenticated endpoints) ---
    def authenticate(self, email: str, password: str) -> str:
        # OAuth2 password flow: form-encoded, email travels as `username`.
        data = self.gateway.post("/auth/token", data={"username": email, "password": password})
        token = _field(data, "access_token")
        if not token:
            raise ValueError("authentication response carried no access_token")
        return token

    def create_account(self, email: str, password: str) -> None:
        self.gateway.post("/auth/signup", json={"email": email, "password": password})

    def request_password_reset(self, email: str) -> str:
        data = self.gateway.post("/auth/forgot-password", json={"email": email})
        return _field(data, "message")

    def reset_password(self, token: str, new_password: str) -> str:
        data = self.gateway.post("/auth/reset-password", json={"token": token, "new_password": new_password})
        return _field(data, "message")

    # --- projects ---
    def list_projects(self) -> List[Project]:
        return [Project.from_api(row) for row in _rows(self.gateway.get("/projects"), "/projects")]

    def create_project(self, name: str) -> Project:
        return Project.from_api(self.gateway.post("/projects", json={"name": name}))

    def delete_project(self, project_id: int) -> None:
        self.gateway.delete(f"/projects/{project_id}")

    def delete_current_user(self) -> None:
        self.gateway.delete("/users/me")

    # --- analytics ---
    def get_project_stats(self, project_id: int) -> ProjectStats:
        return ProjectStats.from_api(self.gateway.get(f"/v1/projects/{project_id}/stats"))

    def get_project_analytics(self, project_id: int) -> ProjectAnalytics:
        return ProjectAnalytics.from_api(self.gateway.get(f"/v1/projects/{project_id}/analytics"))

    def get_project_model_analytics(self, project_id: int) -> List[ModelUsage]:
        path = f"/v1/projects/{project_id}/analytics/models"
        rows = _rows(self.gateway.get(path), path)
        return [ModelUsage.from_api(row) for row in rows]

    def update_project_budget(self, project_id: int, amount: int) -> None:
        self.gateway.put(f"/v1/projects/{project_id}/budget", json={"monthly_budget": amount})
