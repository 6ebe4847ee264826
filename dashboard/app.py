"""
dashboard/app.py
----------------
Streamlit dashboard: EV sales and battery-production footprint.

Four tabs, each pulling one view from the shared dataset bundle:
  - Sales       → stacked BEV/PHEV bars + ranked market-share table
  - Pollution   → battery-production impact factors
  - China map   → battery cities with producer / CO2 / water popups
  - U.S. map    → battery cities with automaker / CO2 / risk popups

Run from PROJECT ROOT:
  streamlit run dashboard/app.py
"""

import sys
import os
import logging
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
os.chdir(PROJECT_ROOT)

import streamlit as st
from streamlit_folium import st_folium

from config import DATASET_SOURCE
from data_bundle.bundle import LoadError, get_bundle
from modeling.geo_engine import china_markers, us_markers
from modeling.pollution_engine import pollution_frame
from modeling.sales_engine import compute_chart_series, compute_sales_summary
from visualization.map_plots import build_marker_map
from visualization.sales_plots import plot_sales_stacked_bar

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# ── PAGE CONFIG ───────────────────────────────────────────────────────────────
st.set_page_config(
    page_title="EV Battery Footprint",
    page_icon="🔋",
    layout="wide",
)

st.markdown("""
<style>
  .block-container {
    padding-top: 1.5rem !important;
    padding-bottom: 2rem !important;
    max-width: 1280px !important;
  }
  footer {visibility: hidden;}

  [data-testid="stTabs"] button {
    border: 1px solid #0a9396 !important;
    border-radius: 5px !important;
    color: #0a9396 !important;
    font-weight: 600 !important;
  }
  [data-testid="stTabs"] button[aria-selected="true"] {
    background-color: #0a9396 !important;
    color: white !important;
  }
</style>
""", unsafe_allow_html=True)


# ── PLOTLY THEME ──────────────────────────────────────────────────────────────
def dashboard_plotly_layout(fig, height=480):
    """Light theme shared by every chart on the page."""
    fig.update_layout(
        paper_bgcolor="#FFFFFF",
        plot_bgcolor="#FFFFFF",
        font=dict(family="DM Sans, sans-serif", color="#1A2E3B", size=12),
        title=dict(font=dict(color="#002A47", size=14), x=0.0, xanchor="left"),
        legend=dict(orientation="h", y=-0.2, x=0.0, font=dict(size=11, color="#607D8B")),
        xaxis=dict(showgrid=False, linecolor="#CBD5E0", tickfont=dict(color="#607D8B", size=11)),
        yaxis=dict(gridcolor="#F0F4F7", linecolor="#CBD5E0", tickfont=dict(color="#607D8B", size=11),
                   rangemode="tozero"),
        height=height,
        margin=dict(l=8, r=8, t=48, b=48),
    )
    for trace in fig.data:
        if "bar" in type(trace).__name__.lower():
            trace.update(marker_line_width=0)
    return fig


# ── CACHED LOADERS ────────────────────────────────────────────────────────────

@st.cache_data
def get_sales_view(source):
    sales = get_bundle(source).sales
    summary = compute_sales_summary(sales)
    fig = dashboard_plotly_layout(plot_sales_stacked_bar(compute_chart_series(sales)))
    return summary, fig


@st.cache_data
def get_pollution_view(source):
    return pollution_frame(get_bundle(source).pollution)


try:
    bundle = get_bundle(DATASET_SOURCE)
except LoadError as e:
    logger.error(f"Dataset rejected: {e}")
    st.error(f"❌ Dataset could not be loaded: {e}")
    st.stop()


# ── HEADER ────────────────────────────────────────────────────────────────────
st.title("EV Sales & Battery Production Footprint")
st.caption("Plug-in sales by brand, pollution factors of cell manufacturing, "
           "and where the cells are made in China and the U.S.")

counts = bundle.summary()
c1, c2, c3, c4 = st.columns(4)
c1.metric("Brands", counts['sales'])
c2.metric("Pollution factors", counts['pollution'])
c3.metric("China cities", counts['china_cities'])
c4.metric("U.S. cities", counts['us_cities'])


# ── TABS ──────────────────────────────────────────────────────────────────────
tab1, tab2, tab3, tab4 = st.tabs([
    "📊 EV Sales",
    "🏭 Pollution Factors",
    "🇨🇳 China Battery Cities",
    "🇺🇸 U.S. Battery Cities",
])

with tab1:
    st.markdown("### Plug-in Sales by Brand")
    try:
        summary, fig_sales = get_sales_view(DATASET_SOURCE)
    except ZeroDivisionError as e:
        logger.error(f"Sales view unavailable: {e}")
        st.error(f"❌ {e}")
    else:
        st.plotly_chart(fig_sales, width="stretch", config={'displayModeBar': False})

        st.markdown("#### Market Share")
        st.dataframe(
            summary,
            hide_index=True,
            width="stretch",
            column_config={
                'rank': st.column_config.NumberColumn("Rank"),
                'brand': st.column_config.TextColumn("Brand"),
                'bev_units': st.column_config.NumberColumn("BEV", format="%d"),
                'phev_units': st.column_config.NumberColumn("PHEV", format="%d"),
                'total_units': st.column_config.NumberColumn("Total", format="%d"),
                'market_share_percent': st.column_config.NumberColumn("Share (%)", format="%.2f"),
            },
        )

with tab2:
    st.markdown("### Battery Production Pollution Factors")
    st.dataframe(get_pollution_view(DATASET_SOURCE), hide_index=True, width="stretch")

with tab3:
    st.markdown("### China Battery-Production Cities")
    st.caption("Click a marker for producer, capacity, CO2 and water figures.")
    st_folium(build_marker_map(china_markers(bundle), "china"),
              use_container_width=True, height=540, key="china_map")

with tab4:
    st.markdown("### U.S. Battery-Production Cities")
    st.caption("Click a marker for automaker, capacity, CO2 and local risks.")
    st_folium(build_marker_map(us_markers(bundle), "us"),
              use_container_width=True, height=540, key="us_map")
