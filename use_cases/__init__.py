"""Application layer contracts for orchestrating high-level flows."""

from .budget_flow import BudgetUpdateResult, parse_budget, update_budget
from .domain_models import DailyUsage, ModelUsage, Project, ProjectAnalytics, ProjectDetail, ProjectStats
from .project_flow import (
    ActionResult,
    ProjectListState,
    cancel_deletion,
    confirm_deletion,
    create_project,
    load_project_detail,
    load_projects,
    stage_deletion,
)
from .route_guard import GuardResult, guard_protected_view, guard_public_view, guard_route
from .session_models import Session, ViewOutcome, is_authenticated, ready, redirect

__all__ = [
    "ActionResult",
    "BudgetUpdateResult",
    "DailyUsage",
    "GuardResult",
    "ModelUsage",
    "Project",
    "ProjectAnalytics",
    "ProjectDetail",
    "ProjectListState",
    "ProjectStats",
    "Session",
    "ViewOutcome",
    "cancel_deletion",
    "confirm_deletion",
    "create_project",
    "guard_protected_view",
    "guard_public_view",
    "guard_route",
    "is_authenticated",
    "load_project_detail",
    "load_projects",
    "parse_budget",
    "ready",
    "redirect",
    "stage_deletion",
    "update_budget",
]
