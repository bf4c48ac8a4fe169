import logging
from typing import Callable

import streamlit as st

import auth
from infrastructure.storage.credential_store import BrowserCredentialStore
from use_cases import routes
from use_cases.session_models import (
    Session,
    ViewOutcome,
    anonymous_session,
    authenticated_session,
    initializing_session,
    redirect,
)

log = logging.getLogger(__name__)

"""
SESSION STATE CONTRACT

Keys of st.session_state owned by this module:

session_controller: SessionController
    single owner of the authenticated/anonymous truth for this browser session
    default: created on first access, hydrated from the browser cookie
    owner: session_manager

sentinel_api: SentinelApi
    backend client bound to the controller's credential store
    default: created on first access
    owner: session_manager

project_list: ProjectListState | None
    in-memory project list of the open dashboard view
    default: None
    owner: dashboard_view

project_detail: dict
    cached detail snapshot per project id
    default: {}
    owner: project_view

active_path: str
    route rendered on the previous run; a change resets the view keys above
    default: unset
    owner: app

budget_input_<id>, confirm_account_deletion, reset_request_message
    per-view form state, dropped with the view
    owner: project_view / settings_view / password_view
"""


class SessionController:
    """
    Owns the Session and is the only writer of the credential store.

    `authenticator(email, password) -> token` raises on bad credentials.
    Every transition swaps in a new frozen Session, so readers holding an
    older reference never see a half-updated value.
    """

    def __init__(self, credential_store, authenticator: Callable[[str, str], str]):
        self.credential_store = credential_store
        self.authenticator = authenticator
        self._session = initializing_session()

    def current(self) -> Session:
        return self._session

    def initialize(self) -> Session:
        if not self._session.initializing:
            return self._session
        token = self.credential_store.get()
        self._session = authenticated_session(token) if token else anonymous_session()
        log.info(f"Session initialized: {self._session.status}")
        return self._session

    def login(self, email: str, password: str) -> ViewOutcome:
        # Propagates authenticator errors; the session stays as it was.
        token = self.authenticator(email, password)
        self.credential_store.set(token)
        self._session = authenticated_session(token)
        log.info("Login succeeded")
        return redirect(routes.DASHBOARD)

    def logout(self) -> ViewOutcome:
        self.credential_store.clear()
        self._session = anonymous_session()
        log.info("Logged out")
        return redirect(routes.LOGIN)


def init_session_state():
    if "project_list" not in st.session_state:
        st.session_state.project_list = None
    if "project_detail" not in st.session_state:
        st.session_state.project_detail = {}
    if "session_controller" not in st.session_state:
        store = BrowserCredentialStore.from_browser(secure=auth.cookie_secure())
        api = auth.build_api(store)
        st.session_state.sentinel_api = api
        st.session_state.session_controller = SessionController(
            store, lambda email, password: auth.authenticate_user(api, email, password)
        )
    st.session_state.session_controller.initialize()


def get_session_controller() -> SessionController:
    init_session_state()
    return st.session_state.session_controller


def get_api():
    init_session_state()
    return st.session_state.sentinel_api


VIEW_KEY_PREFIXES = ("budget_input_",)
VIEW_FLAGS = ("confirm_account_deletion", "reset_request_message")


def clear_view_state():
    st.session_state.project_list = None
    st.session_state.project_detail = {}
    for key in list(st.session_state.keys()):
        if key in VIEW_FLAGS or str(key).startswith(VIEW_KEY_PREFIXES):
            del st.session_state[key]


def logout() -> ViewOutcome:
    outcome = get_session_controller().logout()
    clear_view_state()
    return outcome
