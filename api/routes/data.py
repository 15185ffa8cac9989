"""
Telemetry Data Endpoint

Every call fabricates a new reading, stores it, and returns the latest
readings from the store. When the store cannot be read the caller still
gets a 200 with a single offline record built from the fresh payload.

Note: the write happens on every poll, so listing readings also grows
the table.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request

from api.database import RECENT_LIMIT, StoreGateway
from api.models import Reading
from engine.generator import TelemetryGenerator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Telemetry"])


def get_store(request: Request) -> StoreGateway:
    """Dependency that provides the store gateway held by the app."""
    return request.app.state.store


def get_generator(request: Request) -> TelemetryGenerator:
    """Dependency that provides the telemetry generator held by the app."""
    return request.app.state.generator


@router.get(
    "/data",
    response_model=List[Reading],
    summary="Get latest telemetry",
    description="""
    Generate a new reading, store it, and return up to 10 most recent
    readings, newest first.

    If the store cannot be read, a single `offline_stub` record with
    `id` 0 is returned instead. This endpoint never returns an error.
    """
)
def get_data(
    store: StoreGateway = Depends(get_store),
    generator: TelemetryGenerator = Depends(get_generator)
):
    """Generate, store, and list telemetry readings."""
    reading = generator.generate_reading()

    # Writes are advisory: the endpoint answers with or without a durable
    # store, and insert() has already logged the failure.
    store.insert(reading)

    result = store.recent(RECENT_LIMIT)
    if result.ok:
        return result.value
    else:
        logger.warning(f"Serving offline reading, store read failed: {result.error}")
        return [Reading.offline(reading.payload)]
