"""
API Routes Module

- data.py: Telemetry data endpoint (generate, store, list)

The router is included by main.py.
"""

from .data import router as data_router

__all__ = [
    "data_router",
]
