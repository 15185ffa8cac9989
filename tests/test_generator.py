"""
Tests for the Synthetic Telemetry Generator

These tests verify that generated payloads stay inside their ranges and
always have the shape the API serves.

Run with: pytest tests/test_generator.py -v
"""

import random
import time
from datetime import datetime, timezone

import pytest

from api.models import TelemetryPayload
from engine.generator import (
    DEFAULT_SOURCE,
    GeneratedReading,
    TelemetryGenerator,
    generate_payload,
)


class TestGeneratePayload:
    """Test the payload function."""

    def setup_method(self):
        """Set up test fixtures."""
        self.rng = random.Random(1234)

    def test_payload_fields(self):
        """Test payload has exactly the three expected fields."""
        payload = generate_payload(self.rng)

        assert set(payload) == {"iss_position", "fuel_level", "timestamp"}
        assert set(payload["iss_position"]) == {"latitude", "longitude"}

    def test_ranges_hold_over_many_samples(self):
        """Test every sample stays inside its range."""
        for _ in range(2000):
            payload = generate_payload(self.rng)
            position = payload["iss_position"]

            assert 51.0 <= position["latitude"] < 61.0
            assert -0.1 <= position["longitude"] < 19.9
            assert isinstance(payload["fuel_level"], int)
            assert 80 <= payload["fuel_level"] < 100

    def test_fuel_level_covers_range(self):
        """Test the fuel level takes every value in [80, 100)."""
        levels = {generate_payload(self.rng)["fuel_level"] for _ in range(3000)}
        assert levels == set(range(80, 100))

    def test_extreme_random_values(self):
        """Test range bounds with a random source at its extremes."""
        class LowRandom(random.Random):
            def random(self):
                return 0.0

        class HighRandom(random.Random):
            def random(self):
                return 0.9999999999

        low = generate_payload(LowRandom())
        high = generate_payload(HighRandom())

        assert low["iss_position"]["latitude"] == 51.0
        assert low["iss_position"]["longitude"] == pytest.approx(-0.1)
        assert high["iss_position"]["latitude"] < 61.0
        assert high["iss_position"]["longitude"] < 19.9

    def test_timestamp_from_clock(self):
        """Test timestamp is the injected clock's integer time."""
        payload = generate_payload(self.rng, clock=lambda: 1700000000.75)
        assert payload["timestamp"] == 1700000000

    def test_timestamp_is_current_time(self):
        """Test the default clock is the current unix time."""
        before = int(time.time())
        payload = generate_payload()
        after = int(time.time())

        assert before <= payload["timestamp"] <= after

    def test_payload_matches_wire_model(self):
        """Test generated payloads validate against the API model."""
        payload = generate_payload(self.rng)
        model = TelemetryPayload.model_validate(payload)

        assert model.fuel_level == payload["fuel_level"]


class TestTelemetryGenerator:
    """Test the stateful generator."""

    def test_default_source(self):
        """Test readings are labelled with the default source."""
        reading = TelemetryGenerator().generate_reading()

        assert isinstance(reading, GeneratedReading)
        assert reading.source == DEFAULT_SOURCE == "nasa_stub"

    def test_seed_is_reproducible(self):
        """Test the same seed gives the same payloads."""
        clock = lambda: 1700000000.0
        first = TelemetryGenerator(random_seed=7, clock=clock)
        second = TelemetryGenerator(random_seed=7, clock=clock)

        for _ in range(5):
            assert first.generate_payload() == second.generate_payload()

    def test_fetched_at_from_clock(self):
        """Test capture time comes from the generator's clock."""
        gen = TelemetryGenerator(clock=lambda: 1700000000.0)
        reading = gen.generate_reading()

        assert reading.fetched_at == datetime.fromtimestamp(1700000000, tz=timezone.utc)
        assert reading.payload["timestamp"] == 1700000000

    def test_reading_is_immutable(self):
        """Test generated readings cannot be reassigned."""
        reading = TelemetryGenerator().generate_reading()

        with pytest.raises(AttributeError):
            reading.source = "other"
