import streamlit as st

import auth
from use_cases import routes
from use_cases.errors import ValidationError
from utils import session_manager
from views.navigation import navigate


def render_forgot_password_screen():
    st.title("🔑 Forgot Password")
    st.caption("Enter your email and we will send you a link to reset your password.")

    if st.session_state.get("reset_request_message"):
        st.success(st.session_state.reset_request_message)
    else:
        with st.form("forgot_password_form"):
            email = st.text_input("Email", placeholder="m@example.com")
            submitted = st.form_submit_button("Send reset link", type="primary")
            if submitted:
                try:
                    message = auth.request_password_reset(session_manager.get_api(), email)
                except ValidationError as e:
                    st.error(str(e))
                else:
                    st.session_state.reset_request_message = message
                    st.rerun()

    if st.button("Back to login", key="forgot_back"):
        st.session_state.reset_request_message = None
        navigate(routes.LOGIN)


def render_reset_password_screen(token):
    st.title("🔁 Reset Your Password")

    with st.form("reset_password_form"):
        new_password = st.text_input("New password", type="password")
        password_confirm = st.text_input("Confirm new password", type="password")
        submitted = st.form_submit_button("Reset password", type="primary")
        if submitted:
            try:
                message = auth.reset_password(session_manager.get_api(), token, new_password, password_confirm)
            except (auth.InvalidResetTokenError, ValidationError) as e:
                st.error(str(e))
            else:
                st.success(message or "Your password has been reset.")

    if st.button("Go to login", key="reset_back"):
        navigate(routes.LOGIN)
