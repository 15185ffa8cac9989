"""
Dashboard Components Module

Reusable pieces for the Streamlit dashboard.

Components:
- feed: Backend client with frontend stub fallback
- charts: Plotly position map and fuel chart
"""

from .charts import (
    create_fuel_chart,
    create_position_map,
)
from .feed import (
    check_api_health,
    fetch_readings,
    frontend_stub,
    readings_to_frame,
)

__all__ = [
    # Charts
    "create_fuel_chart",
    "create_position_map",

    # Feed
    "check_api_health",
    "fetch_readings",
    "frontend_stub",
    "readings_to_frame",
]
