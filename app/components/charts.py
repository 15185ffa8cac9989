"""
Chart Components for Dashboard

Plotly figures for the telemetry dashboard. All builders take the frame
produced by `readings_to_frame` (newest reading first).
"""

import plotly.graph_objects as go
import pandas as pd


# =========================================
# Color Schemes
# =========================================

COLORS = {
    "primary": "#3B82F6",    # Blue
    "latest": "#EF4444",     # Red
    "good": "#10B981",       # Green
    "fair": "#FBBF24",       # Yellow
    "poor": "#F97316",       # Orange
    "background": "#1F2937", # Dark gray
    "text": "#F9FAFB",       # Light text
    "grid": "#374151",       # Grid lines
}


def get_fuel_color(fuel_level: float) -> str:
    """Get color based on fuel level."""
    if fuel_level >= 95:
        return COLORS["good"]
    elif fuel_level >= 87:
        return COLORS["fair"]
    else:
        return COLORS["poor"]


def _apply_layout(fig: go.Figure, title: str, height: int) -> go.Figure:
    fig.update_layout(
        title=dict(text=title, font=dict(size=16, color=COLORS["text"])),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(color=COLORS["text"]),
        height=height,
        margin=dict(l=20, r=20, t=50, b=20),
        showlegend=False
    )
    return fig


# =========================================
# Position Map
# =========================================

def create_position_map(frame: pd.DataFrame, height: int = 450) -> go.Figure:
    """
    Create a map of reported positions.

    The track is drawn oldest to newest; the newest point is highlighted.

    Args:
        frame: Readings frame, newest first
        height: Chart height in pixels

    Returns:
        Plotly figure
    """
    fig = go.Figure()

    if not frame.empty:
        track = frame.iloc[::-1]
        fig.add_trace(go.Scattergeo(
            lat=track["latitude"],
            lon=track["longitude"],
            mode="lines+markers",
            line=dict(color=COLORS["primary"], width=2),
            marker=dict(size=6, color=COLORS["primary"]),
            text=track["fetched_at"].astype(str),
            hovertemplate="%{lat:.2f}, %{lon:.2f}<br>%{text}<extra></extra>"
        ))

        latest = frame.iloc[0]
        fig.add_trace(go.Scattergeo(
            lat=[latest["latitude"]],
            lon=[latest["longitude"]],
            mode="markers",
            marker=dict(size=14, color=COLORS["latest"], symbol="star"),
            hovertemplate="Latest<br>%{lat:.2f}, %{lon:.2f}<extra></extra>"
        ))

    fig.update_geos(
        scope="europe",
        showland=True,
        landcolor=COLORS["background"],
        showocean=True,
        oceancolor="#111827",
        showcountries=True,
        countrycolor=COLORS["grid"],
        bgcolor="rgba(0,0,0,0)"
    )

    return _apply_layout(fig, "ISS Position", height)


# =========================================
# Fuel Level
# =========================================

def create_fuel_chart(frame: pd.DataFrame, height: int = 300) -> go.Figure:
    """
    Create a bar chart of fuel level per reading.

    Args:
        frame: Readings frame, newest first
        height: Chart height in pixels

    Returns:
        Plotly figure
    """
    fig = go.Figure()

    if not frame.empty:
        ordered = frame.iloc[::-1]
        fig.add_trace(go.Bar(
            x=ordered["fetched_at"],
            y=ordered["fuel_level"],
            marker_color=[get_fuel_color(v) for v in ordered["fuel_level"]],
            hovertemplate="%{x}<br>Fuel: %{y}%<extra></extra>"
        ))

    fig.update_yaxes(range=[0, 100], title="Fuel (%)", gridcolor=COLORS["grid"])
    fig.update_xaxes(gridcolor=COLORS["grid"])

    return _apply_layout(fig, "Fuel Level", height)
