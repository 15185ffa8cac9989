"""
Engine Module - Synthetic Telemetry Generation

This module fabricates the telemetry readings served by the API.

Key Components:
- generate_payload: One payload from a random source and a clock
- TelemetryGenerator: Seedable generator producing stamped readings

Usage:
    from engine import TelemetryGenerator

    generator = TelemetryGenerator(random_seed=7)
    reading = generator.generate_reading()
"""

from .generator import (
    GeneratedReading,
    TelemetryGenerator,
    generate_payload,
)

__all__ = [
    "GeneratedReading",
    "TelemetryGenerator",
    "generate_payload",
]

__version__ = "0.1.0"
