"""
Streamlit Dashboard Application

Web dashboard for the Space Telemetry backend.

Components:
- dashboard.py: Main dashboard page
- components/: Reusable pieces
  - feed.py: Backend client with stub fallback
  - charts.py: Plotly chart components
"""

__version__ = "0.1.0"
