"""
Synthetic Telemetry Generator

Produces fake ISS-style telemetry readings that stand in for a real
satellite data feed. Each reading carries a position over northern
Europe, a fuel level and the unix time it was produced.

Ranges:
- latitude: [51.0, 61.0)
- longitude: [-0.1, 19.9)
- fuel_level: integer in [80, 100)
"""

import random
import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional
from dataclasses import dataclass, field


LATITUDE_MIN = 51.0
LATITUDE_SPAN = 10.0
LONGITUDE_MIN = -0.1
LONGITUDE_SPAN = 20.0
FUEL_LEVEL_MIN = 80
FUEL_LEVEL_MAX = 100  # exclusive

DEFAULT_SOURCE = "nasa_stub"


def generate_payload(
    rng: Optional[random.Random] = None,
    clock: Optional[Callable[[], float]] = None
) -> Dict[str, Any]:
    """
    Generate one telemetry payload.

    Args:
        rng: Random source (module-level random if None)
        clock: Callable returning unix time in seconds (time.time if None)

    Returns:
        Dictionary with iss_position, fuel_level and timestamp
    """
    rng = rng or random
    clock = clock or time.time

    return {
        "iss_position": {
            "latitude": LATITUDE_MIN + rng.random() * LATITUDE_SPAN,
            "longitude": LONGITUDE_MIN + rng.random() * LONGITUDE_SPAN,
        },
        "fuel_level": rng.randrange(FUEL_LEVEL_MIN, FUEL_LEVEL_MAX),
        "timestamp": int(clock()),
    }


@dataclass(frozen=True)
class GeneratedReading:
    """A freshly generated reading that has not been stored yet."""
    source: str
    payload: Dict[str, Any]
    fetched_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )


class TelemetryGenerator:
    """
    Generator for synthetic telemetry readings.

    Example:
        gen = TelemetryGenerator(random_seed=42)
        reading = gen.generate_reading()
        reading.payload["fuel_level"]  # 80..99
    """

    def __init__(
        self,
        source: str = DEFAULT_SOURCE,
        random_seed: Optional[int] = None,
        clock: Optional[Callable[[], float]] = None
    ):
        """
        Initialize the generator.

        Args:
            source: Label stored with every reading
            random_seed: Seed for reproducible random generation
            clock: Unix time source, mainly for tests
        """
        self.source = source
        self.rng = random.Random(random_seed)
        self.clock = clock or time.time

    def generate_payload(self) -> Dict[str, Any]:
        """Generate a payload from this generator's random source."""
        return generate_payload(self.rng, self.clock)

    def generate_reading(self) -> GeneratedReading:
        """Generate a payload and stamp it with the capture time."""
        payload = self.generate_payload()
        return GeneratedReading(
            source=self.source,
            payload=payload,
            fetched_at=datetime.fromtimestamp(self.clock(), tz=timezone.utc)
        )
