"""
Space Telemetry - Streamlit Dashboard

Shows the latest readings served by the backend: current position on a
map, fuel level trend and the raw records. When the backend is down the
page still renders with a single frontend stub record.

Run with: streamlit run app/dashboard.py
"""

import os
import streamlit as st

from components.charts import create_fuel_chart, create_position_map
from components.feed import (
    FRONTEND_SOURCE,
    check_api_health,
    fetch_readings,
    readings_to_frame,
)


# =========================================
# Configuration
# =========================================

API_URL = os.getenv("API_URL", "http://localhost:3000")

st.set_page_config(
    page_title="Space Dashboard",
    page_icon="🛰️",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
    .main .block-container {
        padding-top: 2rem;
        padding-bottom: 2rem;
    }

    [data-testid="stMetric"] {
        background: rgba(31, 41, 55, 0.6);
        border-radius: 10px;
        padding: 15px;
        border: 1px solid #374151;
    }

    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}
</style>
""", unsafe_allow_html=True)


@st.cache_data(ttl=5)
def load_readings(api_url: str):
    """Fetch readings with a short cache so reruns don't flood the backend."""
    return fetch_readings(api_url)


# =========================================
# Sidebar
# =========================================

def render_sidebar():
    """Render the sidebar with connection status and controls."""
    with st.sidebar:
        st.title("🛰️ Space Dashboard")
        st.markdown("---")

        if check_api_health(API_URL):
            st.success("🟢 API Connected")
        else:
            st.error("🔴 API Disconnected")
            st.info(f"API URL: {API_URL}")

        st.markdown("---")

        if st.button("🔄 Fetch new reading", use_container_width=True):
            load_readings.clear()


# =========================================
# Main Page
# =========================================

def render_main():
    """Render metrics, charts and the raw table."""
    readings = load_readings(API_URL)
    frame = readings_to_frame(readings)

    st.header("ISS Telemetry")

    if frame.empty:
        if readings and readings[0].get("source") == FRONTEND_SOURCE:
            st.warning("Telemetry service unavailable. Showing placeholder data.")
        else:
            st.info("No readings yet.")
        st.json(readings)
        return

    latest = frame.iloc[0]
    if latest["source"] == "offline_stub":
        st.warning("Store offline. Showing a live reading that was not saved.")

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Latitude", f"{latest['latitude']:.4f}°")
    col2.metric("Longitude", f"{latest['longitude']:.4f}°")
    col3.metric("Fuel", f"{int(latest['fuel_level'])}%")
    col4.metric("Readings", len(frame))

    map_col, fuel_col = st.columns([3, 2])
    with map_col:
        st.plotly_chart(create_position_map(frame), use_container_width=True)
    with fuel_col:
        st.plotly_chart(create_fuel_chart(frame), use_container_width=True)

    with st.expander("Raw readings"):
        st.dataframe(frame, use_container_width=True, hide_index=True)


render_sidebar()
render_main()
