"""Session DTOs shared across application layers."""

from dataclasses import dataclass
from typing import Any, Literal, Optional

SessionStatus = Literal["INITIALIZING", "AUTHENTICATED", "UNAUTHENTICATED"]
OutcomeStatus = Literal["READY", "REDIRECT"]


@dataclass(frozen=True)
class Session:
    token: Optional[str] = None
    authenticated: bool = False
    initializing: bool = True

    @property
    def status(self) -> SessionStatus:
        if self.initializing:
            return "INITIALIZING"
        return "AUTHENTICATED" if self.authenticated else "UNAUTHENTICATED"


def initializing_session() -> Session:
    return Session(token=None, authenticated=False, initializing=True)


def authenticated_session(token: str) -> Session:
    return Session(token=token, authenticated=True, initializing=False)


def anonymous_session() -> Session:
    return Session(token=None, authenticated=False, initializing=False)


def is_authenticated(session: Session) -> bool:
    return session.status == "AUTHENTICATED"


@dataclass(frozen=True)
class ViewOutcome:
    """Result contract for view orchestration: render data or go elsewhere."""

    status: OutcomeStatus
    route: Optional[str] = None
    data: Any = None
    message: str = ""


def ready(data: Any = None) -> ViewOutcome:
    return ViewOutcome(status="READY", data=data)


def redirect(route: str, message: str = "") -> ViewOutcome:
    return ViewOutcome(status="REDIRECT", route=route, message=message)
