"""Route names and parsing for the dashboard's views."""

from dataclasses import dataclass
from typing import Literal, Optional

LOGIN = "/login"
SIGNUP = "/signup"
FORGOT_PASSWORD = "/forgot-password"
RESET_PASSWORD = "/reset-password"
DASHBOARD = "/dashboard"
PROJECT = "/project"
SETTINGS = "/settings"

ViewName = Literal["login", "signup", "forgot_password", "reset_password", "dashboard", "project", "settings"]

PUBLIC_VIEWS = ("login", "signup", "forgot_password", "reset_password")

_STATIC = {
    LOGIN: "login",
    SIGNUP: "signup",
    FORGOT_PASSWORD: "forgot_password",
    DASHBOARD: "dashboard",
    SETTINGS: "settings",
}


@dataclass(frozen=True)
class Route:
    view: ViewName
    param: Optional[str] = None

    @property
    def is_protected(self) -> bool:
        return self.view not in PUBLIC_VIEWS


def project_route(project_id) -> str:
    return f"{PROJECT}/{project_id}"


def reset_password_route(token: str) -> str:
    return f"{RESET_PASSWORD}/{token}"


def parse_route(path: Optional[str]) -> Route:
    """Resolve a path to a view. Unknown paths land on the dashboard."""
    if not path:
        return Route("dashboard")
    path = "/" + path.strip().strip("/")
    if path in _STATIC:
        return Route(_STATIC[path])
    head, _, tail = path.rpartition("/")
    if head == PROJECT and tail:
        return Route("project", tail)
    if head == RESET_PASSWORD and tail:
        return Route("reset_password", tail)
    return Route("dashboard")


def parse_project_id(raw: Optional[str]) -> Optional[int]:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None
