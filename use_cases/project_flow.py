"""Project list and project detail orchestration (application layer)."""

import logging
from dataclasses import dataclass, field
from typing import List, Literal, Optional

from infrastructure.api.gateway import GatewayError
from use_cases import routes
from use_cases.domain_models import Project, ProjectDetail
from use_cases.errors import ProjectNameError
from use_cases.session_models import ViewOutcome, ready, redirect
from utils.parallel import run_all

log = logging.getLogger(__name__)

ActionStatus = Literal["OK", "INVALID", "FAILED", "SKIPPED"]


@dataclass
class ProjectListState:
    """State owned by the open dashboard view."""

    projects: List[Project] = field(default_factory=list)
    pending_deletion: Optional[Project] = None
    loaded: bool = False


@dataclass(frozen=True)
class ActionResult:
    status: ActionStatus
    message: str = ""
    project: Optional[Project] = None
    clear_input: bool = False


def load_projects(api, controller, state: ProjectListState) -> ViewOutcome:
    """
    Read the user's projects into `state`.

    Any failure is treated as an invalid session: the controller logs out
    and the caller is told to go to the login view. Network outages and
    401s are deliberately not told apart.
    """
    try:
        projects = api.list_projects()
    except (GatewayError, ValueError) as e:
        log.warning(f"Failed to fetch projects, ending session: {e}")
        return controller.logout()
    state.projects = list(projects)
    state.loaded = True
    return ready(state.projects)


def create_project(api, state: ProjectListState, name: str) -> ActionResult:
    if not name or not name.strip():
        return ActionResult(status="INVALID", message=str(ProjectNameError("Project name is required.")))
    try:
        project = api.create_project(name.strip())
    except (GatewayError, ValueError) as e:
        log.warning(f"Failed to create project: {e}")
        return ActionResult(status="FAILED", message="Failed to create project. Please try again.")
    state.projects = state.projects + [project]
    return ActionResult(
        status="OK",
        message="Project created successfully!",
        project=project,
        clear_input=True,
    )


def stage_deletion(state: ProjectListState, project: Project) -> None:
    state.pending_deletion = project


def cancel_deletion(state: ProjectListState) -> None:
    state.pending_deletion = None


def confirm_deletion(api, state: ProjectListState) -> ActionResult:
    project = state.pending_deletion
    if project is None:
        return ActionResult(status="SKIPPED")
    try:
        api.delete_project(project.id)
    except GatewayError as e:
        log.warning(f"Failed to delete project {project.id}: {e}")
        return ActionResult(status="FAILED", message="Failed to delete project. Please try again.", project=project)
    finally:
        state.pending_deletion = None
    state.projects = [p for p in state.projects if p.id != project.id]
    return ActionResult(status="OK", message=f"Project '{project.name}' deleted successfully!", project=project)


def load_project_detail(api, project_id, include_models: bool = True) -> ViewOutcome:
    """
    Fetch stats, 30-day analytics and (optionally) the per-model breakdown
    concurrently. Any failed read sends the user back to the project list;
    no partial detail is ever returned.
    """
    pid = routes.parse_project_id(project_id)
    if pid is None:
        return redirect(routes.DASHBOARD, message="Unknown project.")

    tasks = {
        "stats": lambda: api.get_project_stats(pid),
        "analytics": lambda: api.get_project_analytics(pid),
    }
    if include_models:
        tasks["models"] = lambda: api.get_project_model_analytics(pid)

    try:
        results = run_all(tasks)
    except (GatewayError, ValueError) as e:
        log.warning(f"Failed to fetch project {pid} data: {e}")
        return redirect(routes.DASHBOARD, message="Failed to load project data.")

    models = results.get("models")
    return ready(
        ProjectDetail(
            stats=results["stats"],
            analytics=results["analytics"],
            models=tuple(models) if models is not None else None,
        )
    )
