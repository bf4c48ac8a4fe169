import streamlit as st

from use_cases import routes
from use_cases.session_models import ViewOutcome
from utils import session_manager

PAGE_PARAM = "page"

SIDEBAR_LINKS = [
    (routes.DASHBOARD, "📊 Dashboard"),
    (routes.SETTINGS, "⚙️ Settings"),
]


def current_route() -> routes.Route:
    return routes.parse_route(st.query_params.get(PAGE_PARAM))


def navigate(route: str):
    st.query_params[PAGE_PARAM] = route
    st.rerun()


def follow(outcome: ViewOutcome):
    """Apply a REDIRECT outcome; READY outcomes are left to the caller."""
    if outcome is not None and outcome.status == "REDIRECT":
        if outcome.message:
            st.toast(outcome.message)
        navigate(outcome.route)


def render_sidebar(active_path: str):
    with st.sidebar:
        st.markdown("### 🛰️ Sentinel")
        for path, label in SIDEBAR_LINKS:
            is_active = active_path == path
            if st.button(label, key=f"nav_{path}", type="primary" if is_active else "secondary", use_container_width=True):
                navigate(path)
        st.divider()
        if st.button("Logout", key="logout_btn", type="secondary", use_container_width=True):
            follow(session_manager.logout())
