"""
Telemetry Feed Client

Fetches readings from the backend for the dashboard. The dashboard must
always render, so any failure to reach the backend yields a single
`frontend_stub` record instead of an exception.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

import pandas as pd
import requests

logger = logging.getLogger(__name__)

FRONTEND_SOURCE = "frontend_stub"

FRAME_COLUMNS = [
    "id",
    "source",
    "latitude",
    "longitude",
    "fuel_level",
    "timestamp",
    "fetched_at",
]


def frontend_stub() -> Dict[str, Any]:
    """Placeholder reading shown when the backend is unavailable."""
    return {
        "id": 0,
        "source": FRONTEND_SOURCE,
        "data": {"error": "Telemetry service unavailable"},
        "fetched_at": datetime.now(timezone.utc).isoformat()
    }


def fetch_readings(api_url: str, timeout: float = 10) -> List[Dict[str, Any]]:
    """
    Fetch the latest readings from the backend.

    Args:
        api_url: Backend base URL
        timeout: Request timeout in seconds

    Returns:
        Readings as returned by the backend, or one frontend stub
    """
    try:
        response = requests.get(f"{api_url}/api/data", timeout=timeout)
        response.raise_for_status()
        return response.json()
    except (requests.exceptions.RequestException, ValueError) as e:
        logger.error(f"Telemetry backend unavailable: {e}")
        return [frontend_stub()]


def check_api_health(api_url: str, timeout: float = 5) -> bool:
    """Check if the backend answers its health check."""
    try:
        response = requests.get(f"{api_url}/health", timeout=timeout)
        return response.status_code == 200
    except requests.exceptions.RequestException:
        return False


def readings_to_frame(readings: List[Dict[str, Any]]) -> pd.DataFrame:
    """
    Flatten readings into one row per reading.

    Readings without a position (stubs) are skipped.

    Args:
        readings: Readings as returned by fetch_readings

    Returns:
        DataFrame with FRAME_COLUMNS, newest first
    """
    rows = []
    for reading in readings:
        data = reading.get("data") or {}
        position = data.get("iss_position")
        if not position:
            continue
        rows.append({
            "id": reading.get("id", 0),
            "source": reading.get("source"),
            "latitude": position.get("latitude"),
            "longitude": position.get("longitude"),
            "fuel_level": data.get("fuel_level"),
            "timestamp": data.get("timestamp"),
            "fetched_at": pd.to_datetime(reading.get("fetched_at"), utc=True),
        })

    frame = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    if not frame.empty:
        frame = frame.sort_values("fetched_at", ascending=False, ignore_index=True)
    return frame
