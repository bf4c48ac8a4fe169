import plotly.express as px
import streamlit as st

import ui
from use_cases import budget_flow, project_flow, routes
from use_cases.domain_models import ProjectDetail, model_usage_frame
from utils import session_manager
from views.navigation import follow, navigate


def _render_kpis(detail: ProjectDetail):
    stats, analytics = detail.stats, detail.analytics
    used_pct = stats.budget_used_pct
    c1, c2, c3 = st.columns(3)
    c1.metric(
        "💸 Spend This Month",
        f"₹{stats.current_usage:,.2f}",
        f"{used_pct:.1f}% of ₹{stats.monthly_budget:,}" if used_pct is not None else "No budget set",
        delta_color="off",
    )
    c2.metric("🧾 Total Requests", f"{analytics.total_requests:,}")
    c3.metric("⚖️ Avg. Cost / Request", f"₹{analytics.average_cost_per_request:,.4f}")


def _render_budget_form(project_id, detail: ProjectDetail):
    input_key = f"budget_input_{project_id}"
    if input_key not in st.session_state:
        st.session_state[input_key] = str(detail.stats.monthly_budget)

    with st.container(border=True):
        st.subheader("Manage Budget")
        st.caption("Set your total monthly spending limit in Rupees.")
        st.text_input("₹ Monthly budget", key=input_key)
        if st.button("Save Budget", type="primary", key=f"save_budget_{project_id}"):
            with st.spinner("Saving..."):
                result = budget_flow.update_budget(
                    session_manager.get_api(), project_id, st.session_state[input_key], detail.stats
                )
            if result.status == "UPDATED":
                st.session_state.project_detail[project_id] = ProjectDetail(
                    stats=result.stats, analytics=detail.analytics, models=detail.models
                )
                st.toast(result.message, icon="✅")
                st.rerun()
            else:
                st.toast(result.message, icon="⚠️")


def _render_usage_chart(detail: ProjectDetail):
    with st.container(border=True):
        st.subheader("Usage (Last 30 Days)")
        frame = detail.analytics.usage_frame()
        if frame.empty:
            st.info("No usage recorded in the last 30 days.")
            return
        fig = px.line(frame, x="date", y="cost", markers=True, labels={"date": "", "cost": "Cost (₹)"})
        st.plotly_chart(ui.update_chart_layout(fig), use_container_width=True)


def _render_model_breakdown(detail: ProjectDetail):
    if detail.models is None:
        return
    st.subheader("Usage by Model")
    ui.render_aggrid(model_usage_frame(list(detail.models)), currency_cols=["Cost"])


def render_project(raw_project_id):
    project_id = routes.parse_project_id(raw_project_id)
    cache = st.session_state.project_detail

    detail = cache.get(project_id)
    if detail is None:
        placeholder = st.empty()
        with placeholder.container():
            ui.render_loading("Loading project analytics...")
            ui.render_skeleton_kpis(num_cols=3)
        outcome = project_flow.load_project_detail(session_manager.get_api(), raw_project_id)
        placeholder.empty()
        if outcome.status == "REDIRECT":
            follow(outcome)
            return
        detail = outcome.data
        cache[project_id] = detail

    if st.button("← Back to projects", key="back_to_dashboard"):
        cache.pop(project_id, None)
        navigate(routes.DASHBOARD)

    st.title(detail.stats.project_name)
    st.caption("Real-time cost and usage analytics.")
    _render_kpis(detail)

    c1, c2 = st.columns(2)
    with c1:
        _render_budget_form(project_id, detail)
    with c2:
        _render_usage_chart(detail)

    _render_model_breakdown(detail)
