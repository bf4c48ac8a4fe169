import streamlit as st

from use_cases import auth_flow
from utils import session_manager
from views.navigation import follow


def render_settings():
    st.title("Account Settings")

    with st.container(border=True):
        st.subheader("Danger Zone")
        st.caption("These actions are permanent and cannot be undone.")
        st.write("Delete your account and all associated data.")

        if not st.session_state.get("confirm_account_deletion"):
            if st.button("Delete Account", type="primary", key="delete_account"):
                st.session_state.confirm_account_deletion = True
                st.rerun()
            return

        st.warning(
            "**Are you absolutely sure?** This will permanently delete your account, all of your "
            "projects, all of your Sentinel Keys, and all of your usage data."
        )
        c1, c2 = st.columns(2)
        if c1.button("Cancel", key="cancel_account_deletion"):
            st.session_state.confirm_account_deletion = False
            st.rerun()
        if c2.button("Yes, delete my account", type="primary", key="confirm_account_deletion_btn"):
            st.session_state.confirm_account_deletion = False
            result = auth_flow.delete_account(session_manager.get_api(), session_manager.get_session_controller())
            if result.status == "DELETED":
                session_manager.clear_view_state()
                st.toast(result.message)
                follow(result.outcome)
            else:
                st.error(result.message)
