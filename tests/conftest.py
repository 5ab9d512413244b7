"""Shared fixtures for tracker tests."""
from __future__ import annotations

from datetime import timedelta

import pytest

from ais_core import ContactTracker, TrackerConfig
from ais_core.signalk import OwnPosition
from tests.fakes import FakeClock, FakeTelemetry, T0

OWN_LAT = 59.90
OWN_LON = 10.70


@pytest.fixture()
def config() -> TrackerConfig:
    return TrackerConfig(
        prune_minutes=15.0,
        live_minutes=3.0,
        stale_minutes=10.0,
        throttle_seconds=0.5,
        hysteresis_min_abs=50.0,
        hysteresis_min_rel=0.10,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def telemetry() -> FakeTelemetry:
    return FakeTelemetry(OwnPosition(OWN_LAT, OWN_LON, T0))


@pytest.fixture()
def tracker(telemetry, config, clock) -> ContactTracker:
    return ContactTracker(
        telemetry,
        config=config,
        clock=clock.wall,
        monotonic=clock.monotonic,
    )


@pytest.fixture()
def make_contact(clock):
    """Build a raw snapshot entry observed `age` seconds before the clock's now."""

    def _make(lat=OWN_LAT + 0.01, lon=OWN_LON, age=0.0, **extra):
        contact = {
            "latitude": lat,
            "longitude": lon,
            "timestamp": clock.now - timedelta(seconds=age),
        }
        contact.update(extra)
        return contact

    return _make
