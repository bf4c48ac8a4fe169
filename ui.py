import html

import pandas as pd
import streamlit as st
from st_aggrid import AgGrid, GridOptionsBuilder, GridUpdateMode, JsCode

def setup_style():
    st.markdown("""
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Manrope:wght@400;600;700;800&display=swap');

        :root {
            --glass-bg: rgba(167, 210, 255, 0.11);
            --glass-border: rgba(234, 247, 255, 0.35);
            --text-main: #f3f8ff;
            --text-soft: rgba(234, 244, 255, 0.72);
            --accent: #73c3ff;
            --danger: #ff7b8a;
        }

        html, body, .stApp {
            font-family: 'Manrope', sans-serif;
            color: var(--text-main);
            background:
                radial-gradient(55rem 28rem at 10% -5%, rgba(111, 198, 255, 0.30), transparent 65%),
                radial-gradient(50rem 24rem at 95% 0%, rgba(145, 125, 255, 0.20), transparent 62%),
                linear-gradient(180deg, #08101d 0%, #0a1422 48%, #0b1420 100%);
            background-attachment: fixed;
        }

        [data-testid="stMetric"] {
            position: relative;
            overflow: hidden;
            background: linear-gradient(155deg, rgba(255, 255, 255, 0.06), rgba(255, 255, 255, 0.01)) !important;
            backdrop-filter: blur(25px) saturate(130%);
            padding: 15px !important;
            border-radius: 20px !important;
            border: 1px solid rgba(255, 255, 255, 0.12) !important;
            box-shadow:
                inset 0 1px 1px rgba(255, 255, 255, 0.4),
                0 8px 24px rgba(0, 0, 0, 0.25) !important;
        }

        [data-testid="stMetricLabel"] {
            font-size: 14px;
            color: rgba(255, 255, 255, 0.6) !important;
        }

        [data-testid="stMetricValue"] {
            font-size: 26px;
            font-weight: 700;
            color: #ffffff;
        }

        .sn-card {
            border-radius: 18px;
            padding: 16px 18px;
            margin-bottom: 0.6rem;
            border: 1px solid var(--glass-border);
            background: linear-gradient(165deg, rgba(183, 223, 255, 0.10), rgba(125, 187, 255, 0.04));
        }

        .sn-card-title { font-size: 1.15rem; font-weight: 700; }
        .sn-card-sub { color: var(--text-soft); font-size: 0.85rem; }

        .sn-danger {
            border: 1px solid var(--danger);
            border-radius: 18px;
            padding: 16px 18px;
        }

        .sn-loading {
            display: flex;
            align-items: center;
            justify-content: center;
            min-height: 40vh;
            color: var(--text-soft);
            font-size: 1.05rem;
        }

        /* --- SKELETON UI --- */
        @keyframes skeletonPulse {
            0% { opacity: 0.6; }
            50% { opacity: 0.3; }
            100% { opacity: 0.6; }
        }

        .skeleton-box {
            animation: skeletonPulse 1.8s ease-in-out infinite;
            background: linear-gradient(160deg, rgba(30, 45, 75, 0.4) 0%, rgba(15, 25, 45, 0.6) 100%) !important;
            border: 1px solid rgba(255, 255, 255, 0.05);
            border-radius: 20px;
            padding: 20px;
            margin-bottom: 1rem;
            min-height: 120px;
        }

        .skeleton-line {
            background: rgba(255, 255, 255, 0.1);
            border-radius: 8px;
            height: 14px;
            margin-bottom: 12px;
        }

        .skeleton-title { width: 50%; height: 12px; margin-bottom: 20px; }
        .skeleton-value { width: 70%; height: 32px; border-radius: 12px; background: rgba(255, 255, 255, 0.15); }
    </style>
    """, unsafe_allow_html=True)

def render_loading(message="Loading..."):
    """Placeholder shown while the session resolves or a view is fetching."""
    st.markdown(
        f'<div class="sn-loading">{html.escape(message)}</div>',
        unsafe_allow_html=True
    )

def render_skeleton_kpis(num_cols=3):
    cols = st.columns(num_cols)
    for col in cols:
        with col:
            st.markdown('''
            <div class="skeleton-box">
                <div class="skeleton-title skeleton-line"></div>
                <div class="skeleton-value skeleton-line"></div>
            </div>
            ''', unsafe_allow_html=True)

def render_card_header(title, subtitle=""):
    st.markdown(
        f'''
        <div class="sn-card">
            <div class="sn-card-title">{html.escape(title)}</div>
            <div class="sn-card-sub">{html.escape(subtitle)}</div>
        </div>
        ''',
        unsafe_allow_html=True
    )

def update_chart_layout(fig):
    fig.update_layout(
        template="plotly_dark",
        font=dict(family="Manrope, sans-serif", size=13, color="#EAF2FF"),
        margin=dict(l=20, r=20, t=50, b=20),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(185,220,255,0.06)",
        hovermode="x unified",
        xaxis=dict(
            showgrid=False,
            zeroline=False,
            showline=True,
            linecolor="rgba(210,230,255,0.28)"
        ),
        yaxis=dict(
            showgrid=True,
            gridcolor="rgba(186,218,255,0.12)",
            zeroline=False
        ),
    )
    return fig

def render_aggrid(df, height=300, currency_cols=None, theme="balham"):
    if df.empty:
        st.info("No data to display yet.")
        return

    currency_cols = currency_cols or []
    gb = GridOptionsBuilder.from_dataframe(df)
    gb.configure_default_column(filterable=True, sortable=True, resizable=True)

    for col in df.columns:
        if col in currency_cols:
            jscode_str = """function(params) {
                if (params.value == null) return '';
                const val = Number(params.value);
                if (isNaN(val)) return params.value;
                return '₹' + val.toLocaleString('en-IN', {minimumFractionDigits: 2, maximumFractionDigits: 4});
            }"""
            gb.configure_column(col, valueFormatter=JsCode(jscode_str), flex=1, minWidth=100)
        elif pd.api.types.is_numeric_dtype(df[col]):
            gb.configure_column(col, flex=1, minWidth=80)
        else:
            gb.configure_column(col, flex=3, minWidth=150)

    valid_themes = ["streamlit", "alpine", "balham", "material"]
    safe_theme = theme if theme in valid_themes else "balham"

    AgGrid(
        df,
        gridOptions=gb.build(),
        height=height,
        theme=safe_theme,
        custom_css={
            ".ag-theme-balham": {
                "--ag-background-color": "rgba(11, 20, 35, 0.9)",
                "--ag-foreground-color": "#eaf3ff",
                "--ag-header-background-color": "rgba(24, 42, 70, 0.92)",
                "--ag-header-foreground-color": "#f3f8ff",
                "--ag-odd-row-background-color": "rgba(15, 27, 45, 0.88)",
            },
            ".ag-root-wrapper": {
                "border-radius": "14px",
                "overflow": "hidden",
                "border": "1px solid rgba(180, 220, 255, 0.25)",
            },
        },
        update_mode=GridUpdateMode.NO_UPDATE,
        allow_unsafe_jscode=True
    )
