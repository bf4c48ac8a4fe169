"""Authentication flow orchestration (application layer)."""

import logging
from dataclasses import dataclass
from typing import Literal, Optional

import auth
from infrastructure.api.gateway import GatewayError
from use_cases.session_models import ViewOutcome

log = logging.getLogger(__name__)

AccountDeletionStatus = Literal["DELETED", "FAILED"]


@dataclass(frozen=True)
class AccountDeletionResult:
    status: AccountDeletionStatus
    outcome: Optional[ViewOutcome] = None
    message: str = ""


def sign_up(api, controller, email, password, password_confirm=None) -> ViewOutcome:
    """Create the account, then log straight in. Errors propagate to the form."""
    auth.create_user(api, email, password, password_confirm)
    return controller.login(email.strip(), password)


def delete_account(api, controller) -> AccountDeletionResult:
    try:
        api.delete_current_user()
    except GatewayError as e:
        log.warning(f"Failed to delete account: {e}")
        return AccountDeletionResult(status="FAILED", message="Failed to delete account. Please try again.")
    return AccountDeletionResult(status="DELETED", outcome=controller.logout(), message="Your account has been deleted.")
