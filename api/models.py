"""
Pydantic Models for API Responses

This module defines the wire format of a telemetry reading as returned
by the data endpoint. All models use Pydantic v2 syntax.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


OFFLINE_SOURCE = "offline_stub"


class IssPosition(BaseModel):
    """Position in floating-point degrees."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    latitude: float
    longitude: float


class TelemetryPayload(BaseModel):
    """
    Payload document stored in the `data` column.

    Exactly three fields; anything else is rejected so that stored and
    served payloads always keep the same shape.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    iss_position: IssPosition
    fuel_level: int = Field(..., description="Fuel level in percent")
    timestamp: int = Field(..., description="Unix time of generation")


class Reading(BaseModel):
    """
    One telemetry reading as served by `GET /api/data`.

    `id` is assigned by the store; it is 0 for records that were never
    persisted.
    """
    id: int = 0
    source: str
    data: TelemetryPayload
    fetched_at: datetime

    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "id": 42,
            "source": "nasa_stub",
            "data": {
                "iss_position": {"latitude": 55.75, "longitude": 12.58},
                "fuel_level": 91,
                "timestamp": 1760659200
            },
            "fetched_at": "2025-10-17T00:00:00Z"
        }
    })

    @classmethod
    def offline(cls, payload: Dict[str, Any]) -> "Reading":
        """Build the fallback record returned when the store cannot be read."""
        return cls(
            id=0,
            source=OFFLINE_SOURCE,
            data=TelemetryPayload.model_validate(payload),
            fetched_at=datetime.now(timezone.utc)
        )
