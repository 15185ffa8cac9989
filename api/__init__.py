"""
API Module - FastAPI Backend

This module provides the HTTP surface of the Space Telemetry service.

Key Components:
- main.py: FastAPI application factory and health endpoint
- models.py: Pydantic schemas for the reading wire format
- database.py: Store gateway (connection pool and queries)
- routes/: Telemetry data endpoint

Endpoints:
- GET /health: Liveness, always "OK"
- GET /api/data: Latest readings, degrades to one offline reading
"""

__version__ = "0.1.0"
