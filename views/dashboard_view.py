import streamlit as st

import ui
from use_cases import project_flow, routes
from use_cases.project_flow import ProjectListState
from utils import session_manager
from views.navigation import follow, navigate


def _get_state() -> ProjectListState:
    if st.session_state.get("project_list") is None:
        st.session_state.project_list = ProjectListState()
    return st.session_state.project_list


def _report(result):
    if result.status == "OK":
        st.toast(result.message, icon="✅")
    elif result.status in ("INVALID", "FAILED"):
        st.toast(result.message, icon="⚠️")


def _render_create_form(api, state):
    with st.expander("➕ Create New Project", expanded=False):
        st.caption("Give your project a name. A unique Sentinel Key will be generated for it.")
        name = st.text_input("Name", key="new_project_name")
        if st.button("Create Project", type="primary", key="create_project_btn"):
            result = project_flow.create_project(api, state, name)
            _report(result)
            if result.clear_input:
                del st.session_state["new_project_name"]
                st.rerun()


def _render_delete_confirmation(api, state):
    project = state.pending_deletion
    if project is None:
        return
    with st.container(border=True):
        st.warning(
            f"**Are you absolutely sure?** This will permanently delete '{project.name}', "
            "its Sentinel Key, and all associated usage data."
        )
        c1, c2 = st.columns(2)
        if c1.button("Cancel", key="cancel_delete"):
            project_flow.cancel_deletion(state)
            st.rerun()
        if c2.button("Continue", type="primary", key="confirm_delete"):
            _report(project_flow.confirm_deletion(api, state))
            st.rerun()


def _render_project_card(state, project):
    with st.container(border=True):
        c1, c2 = st.columns([5, 1])
        with c1:
            ui.render_card_header(project.name, f"Project ID: {project.id}")
        with c2:
            if st.button("Open", key=f"open_{project.id}", use_container_width=True):
                navigate(routes.project_route(project.id))
        st.caption("Sentinel Key")
        # st.code ships a copy-to-clipboard button
        st.code(project.secret_key, language=None)
        if st.button("Delete Project", key=f"delete_{project.id}", type="secondary"):
            project_flow.stage_deletion(state, project)
            st.rerun()


def render_dashboard():
    api = session_manager.get_api()
    controller = session_manager.get_session_controller()
    state = _get_state()

    if not state.loaded:
        placeholder = st.empty()
        with placeholder.container():
            ui.render_loading("Loading your dashboard...")
        outcome = project_flow.load_projects(api, controller, state)
        placeholder.empty()
        if outcome.status == "REDIRECT":
            session_manager.clear_view_state()
            follow(outcome)
            return

    st.title("Your Projects")
    _render_create_form(api, state)
    _render_delete_confirmation(api, state)

    if not state.projects:
        st.info("No projects yet! Click 'Create New Project' to get started.")
        return

    for project in state.projects:
        _render_project_card(state, project)
