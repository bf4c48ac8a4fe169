import os

import streamlit as st

from infrastructure.observability import setup_observability
setup_observability()

import ui
from use_cases.route_guard import guard_route
from utils import session_manager
from views import dashboard_view, login_view, password_view, project_view, settings_view
from views.navigation import current_route, navigate, render_sidebar
from datetime import datetime, timezone

st.set_page_config(page_title="Sentinel Dashboard", page_icon="🛰️", layout="wide", initial_sidebar_state="expanded")

FORCE_HTTPS = os.getenv("FORCE_HTTPS", "False").lower() == "true"

# Health Check (load-balancer heartbeat)
if st.query_params.get("health") == "1":
    st.write({"status": "ok", "version": "1.0", "time": datetime.now(timezone.utc).isoformat()})
    st.stop()

if FORCE_HTTPS:
    proto = st.context.headers.get("x-forwarded-proto", "http").lower()
    if proto != "https":
        st.error("🚨 Insecure connection. Please use HTTPS.")
        st.stop()

ui.setup_style()

# --- SESSION ---
controller = session_manager.get_session_controller()
route = current_route()
path = st.query_params.get("page") or "/dashboard"

# Re-entering a view behaves like a fresh mount: its cached data is refetched.
if st.session_state.get("active_path") != path:
    session_manager.clear_view_state()
    st.session_state.active_path = path

# --- ROUTE GUARD ---
guard = guard_route(route, controller.current())

if guard.status == "SUSPEND":
    ui.render_loading()
    st.stop()

if guard.status == "REDIRECT":
    navigate(guard.route)

# --- VIEWS ---
if route.view == "login":
    login_view.render_login_screen()
elif route.view == "signup":
    login_view.render_signup_screen()
elif route.view == "forgot_password":
    password_view.render_forgot_password_screen()
elif route.view == "reset_password":
    password_view.render_reset_password_screen(route.param)
else:
    render_sidebar(path)
    if route.view == "project":
        project_view.render_project(route.param)
    elif route.view == "settings":
        settings_view.render_settings()
    else:
        dashboard_view.render_dashboard()
