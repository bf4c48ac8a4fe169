import streamlit as st

import auth
from use_cases import auth_flow, routes
from use_cases.errors import ValidationError
from utils import session_manager
from views.navigation import follow, navigate


def render_login_screen():
    session_manager.get_session_controller().credential_store.restore_missing_cookie()

    st.title("🔐 Login")
    st.caption("Enter your email below to login to your account.")

    with st.form("login_form", clear_on_submit=False):
        email = st.text_input("Email", placeholder="m@example.com")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Login", type="primary")
        if submitted:
            try:
                outcome = session_manager.get_session_controller().login(email, password)
            except (auth.InvalidCredentialsError, ValidationError) as e:
                st.error(str(e))
            else:
                follow(outcome)

    c1, c2 = st.columns(2)
    if c1.button("Forgot your password?", key="goto_forgot"):
        navigate(routes.FORGOT_PASSWORD)
    if c2.button("Don't have an account? Sign up", key="goto_signup"):
        navigate(routes.SIGNUP)


def render_signup_screen():
    st.title("📝 Create an account")
    st.caption("Enter your email and a password to get started.")

    with st.form("signup_form", clear_on_submit=False):
        email = st.text_input("Email", placeholder="m@example.com")
        password = st.text_input("Password", type="password")
        password_confirm = st.text_input("Confirm password", type="password")
        submitted = st.form_submit_button("Create account", type="primary")
        if submitted:
            try:
                outcome = auth_flow.sign_up(
                    session_manager.get_api(),
                    session_manager.get_session_controller(),
                    email,
                    password,
                    password_confirm,
                )
            except (auth.AuthError, ValidationError) as e:
                st.error(str(e))
            else:
                follow(outcome)

    if st.button("Already have an account? Login", key="goto_login"):
        navigate(routes.LOGIN)
