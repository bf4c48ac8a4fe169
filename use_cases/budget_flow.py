"""Budget write-then-reread flow."""

import logging
import re
from dataclasses import dataclass
from typing import Literal, Optional

from infrastructure.api.gateway import GatewayError
from use_cases.domain_models import ProjectStats
from use_cases.errors import BudgetValidationError

log = logging.getLogger(__name__)

BudgetStatus = Literal["UPDATED", "INVALID", "FAILED"]

_BUDGET_RE = re.compile(r"^\d+$")


@dataclass(frozen=True)
class BudgetUpdateResult:
    status: BudgetStatus
    stats: Optional[ProjectStats]
    message: str = ""


def parse_budget(raw) -> int:
    text = str(raw if raw is not None else "").strip()
    if not _BUDGET_RE.match(text):
        raise BudgetValidationError("Please enter a valid budget amount.")
    return int(text)


def update_budget(api, project_id: int, raw, current_stats: Optional[ProjectStats]) -> BudgetUpdateResult:
    """
    Commit a new monthly budget, then re-read stats from the backend.

    The displayed stats are always the server's, never the submitted value.
    On any failure the previous snapshot is handed back unchanged.
    """
    try:
        amount = parse_budget(raw)
    except BudgetValidationError as e:
        return BudgetUpdateResult(status="INVALID", stats=current_stats, message=str(e))

    try:
        api.update_project_budget(project_id, amount)
        fresh = api.get_project_stats(project_id)
    except (GatewayError, ValueError) as e:
        log.warning(f"Budget update for project {project_id} failed: {e}")
        return BudgetUpdateResult(status="FAILED", stats=current_stats, message="Failed to update budget.")

    return BudgetUpdateResult(status="UPDATED", stats=fresh, message="Budget updated successfully!")
