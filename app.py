"""
Production Line Dashboard: Interactive Dashboard

Run with:  streamlit run app.py
"""

import sys
from pathlib import Path

import streamlit as st
import plotly.graph_objects as go

sys.path.insert(0, str(Path(__file__).resolve().parent))

from production_dashboard.config import DashboardConfig
from production_dashboard.chart import update_chart
from production_dashboard.dashboard import (
    format_count,
    format_rate,
    get_dashboard_view,
    load_records,
)
from production_dashboard.loaders import (
    SheetConfigError,
    SheetFetchError,
    load_production_workbook,
    parse_production_csv,
    to_edit_url,
)
from production_dashboard.simulator import generate_production_csv
from production_dashboard.transforms import (
    build_fact_production,
    summarise_by_date,
    summarise_by_product,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="Production Dashboard",
    page_icon="🏭",
    layout="wide",
    initial_sidebar_state="expanded",
)

CARD_COLORS = {
    "production": "#3B82F6",
    "qc": "#10B981",
    "defect": "#EF4444",
    "repair": "#F59E0B",
}


# ---------------------------------------------------------------------------
# Data loading (cached)
# ---------------------------------------------------------------------------
@st.cache_data(show_spinner="Loading production sheet...")
def load_sheet_records(sheet_url: str) -> list:
    return load_records(DashboardConfig(sheet_url=sheet_url))


config = DashboardConfig()

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
st.sidebar.title("Production Dashboard")
st.sidebar.markdown("Daily & weekly line report")
st.sidebar.divider()

source = st.sidebar.radio("Data source", ["Google Sheet", "Upload file", "Demo data"])

if source == "Google Sheet":
    st.sidebar.link_button("Open sheet", to_edit_url(config.sheet_url))
    if st.sidebar.button("Refresh"):
        load_sheet_records.clear()

st.sidebar.divider()
st.sidebar.caption(
    f"Targets: {config.daily_target:g}/day · {config.weekly_target:g}/week"
)

# ---------------------------------------------------------------------------
# Load
# ---------------------------------------------------------------------------
records = []
if source == "Google Sheet":
    try:
        records = load_sheet_records(config.sheet_url)
    except SheetConfigError as e:
        st.error(str(e))
        st.stop()
    except SheetFetchError:
        st.error("Error: failed to load data. Check the URL and the sheet's sharing settings.")
        st.stop()
elif source == "Upload file":
    uploaded = st.sidebar.file_uploader("Sheet export", type=["csv", "xlsx"])
    if uploaded is None:
        st.info("Upload a CSV or XLSX export of the production sheet.")
        st.stop()
    if uploaded.name.lower().endswith(".xlsx"):
        records = load_production_workbook(uploaded)
    else:
        records = parse_production_csv(uploaded.getvalue().decode("utf-8-sig"))
else:
    records = parse_production_csv(generate_production_csv())

view = get_dashboard_view(records, config)

if not view["has_data"]:
    st.title("Production Report")
    st.warning("Failed to load data or sheet is empty.")
    st.stop()


# ---------------------------------------------------------------------------
# Helper: stat card
# ---------------------------------------------------------------------------
def stat_card(label: str, value: str, color: str, sub: str = ""):
    st.markdown(
        f"""
        <div style="background: {color}18; border-left: 4px solid {color};
                    border-radius: 8px; padding: 12px; margin-bottom: 8px;">
            <div style="font-size: 12px; color: #888; font-weight: 600; text-transform: uppercase;">{label}</div>
            <div style="font-size: 26px; font-weight: 700; margin: 4px 0;">{value}</div>
            <div style="font-size: 12px; color: #666;">{sub}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def period_cards(figures: dict):
    cols = st.columns(4)
    with cols[0]:
        stat_card(
            "Production",
            f"{format_count(figures['produced'])}/{format_count(figures['target'])}",
            CARD_COLORS["production"],
        )
    with cols[1]:
        stat_card("Production rate", format_rate(figures["production_rate"], 0), CARD_COLORS["qc"])
    with cols[2]:
        stat_card("Defect rate", format_rate(figures["defect_rate"], 1), CARD_COLORS["defect"])
    with cols[3]:
        stat_card("Repair rate", format_rate(figures["repair_rate"], 1), CARD_COLORS["repair"])


# ===========================================================================
# Header
# ===========================================================================
st.title("Production Report")
st.caption(f"Latest date: **{view['latest_date'] or '—'}**")

# ---------------------------------------------------------------------------
# Product line cards
# ---------------------------------------------------------------------------
st.subheader("Product Lines")
line_cols = st.columns(len(view["product_lines"]) or 1)
for col, (name, figures) in zip(line_cols, view["product_lines"].items()):
    with col:
        st.markdown(f"**{name}**")
        inner = st.columns(2)
        with inner[0]:
            stat_card("Production", format_count(figures["produced"]), CARD_COLORS["production"])
            stat_card("Defect", format_count(figures["defect"]), CARD_COLORS["defect"])
        with inner[1]:
            stat_card("QC", format_count(figures["qc_pass"]), CARD_COLORS["qc"])
            stat_card("Repair", format_count(figures["repair"]), CARD_COLORS["repair"])

st.divider()

# ---------------------------------------------------------------------------
# Today / weekly
# ---------------------------------------------------------------------------
left, right = st.columns([3, 2])

with left:
    st.subheader("Today's Report")
    period_cards(view["daily"])
    st.subheader("Weekly Report")
    period_cards(view["period"])

with right:
    st.subheader("Today's Split")
    st.session_state["production_chart"] = update_chart(
        view["chart"]["segments"], st.session_state.get("production_chart")
    )
    st.plotly_chart(st.session_state["production_chart"].figure, use_container_width=True)

st.divider()

# ---------------------------------------------------------------------------
# Daily trend
# ---------------------------------------------------------------------------
fact = build_fact_production(records)
daily = summarise_by_date(fact)

st.subheader("Daily Production")
if daily.empty:
    st.info("No daily data available.")
else:
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=daily["date"],
        y=daily["produced"],
        name="Production",
        marker_color=CARD_COLORS["production"],
    ))
    fig.add_trace(go.Bar(
        x=daily["date"],
        y=daily["defect"],
        name="Defect",
        marker_color=CARD_COLORS["defect"],
    ))
    fig.add_trace(go.Scatter(
        x=daily["date"],
        y=[config.daily_target] * len(daily),
        name="Target",
        mode="lines",
        line=dict(color="#888", width=2, dash="dash"),
    ))
    fig.update_layout(
        barmode="group",
        height=380,
        xaxis_type="category",
        plot_bgcolor="rgba(0,0,0,0)",
        margin=dict(l=10, r=10, t=10, b=40),
    )
    st.plotly_chart(fig, use_container_width=True)

st.subheader("Per Product Line (whole period)")
st.dataframe(summarise_by_product(fact), use_container_width=True, hide_index=True)
