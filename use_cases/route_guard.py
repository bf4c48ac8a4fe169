"""Navigation gate evaluated before a view renders or fetches anything."""

from dataclasses import dataclass
from typing import Literal, Optional

from use_cases import routes
from use_cases.session_models import Session, is_authenticated

GuardStatus = Literal["SUSPEND", "REDIRECT", "CONTINUE"]


@dataclass(frozen=True)
class GuardResult:
    status: GuardStatus
    route: Optional[str] = None


def guard_protected_view(session: Session) -> GuardResult:
    """
    SUSPEND while the session is still resolving (render a placeholder only),
    REDIRECT anonymous visitors to the login view, CONTINUE otherwise.
    """
    if session.status == "INITIALIZING":
        return GuardResult(status="SUSPEND")
    if session.status == "UNAUTHENTICATED":
        return GuardResult(status="REDIRECT", route=routes.LOGIN)
    return GuardResult(status="CONTINUE")


def guard_public_view(session: Session) -> GuardResult:
    """Login/signup pages send signed-in users straight to the dashboard."""
    if session.status == "INITIALIZING":
        return GuardResult(status="SUSPEND")
    if is_authenticated(session):
        return GuardResult(status="REDIRECT", route=routes.DASHBOARD)
    return GuardResult(status="CONTINUE")


def guard_route(route: routes.Route, session: Session) -> GuardResult:
    if route.is_protected:
        return guard_protected_view(session)
    if route.view in ("login", "signup"):
        return guard_public_view(session)
    # Password recovery is reachable whatever the session state.
    return GuardResult(status="CONTINUE")
