"""
End-to-end tracking from SignalK deltas

Feeds delta messages into a SignalKStore and lets a ContactTracker read
from it, the way a host application wires the two together.
"""
from __future__ import annotations

import json
import math
from datetime import timedelta

import pytest

from ais_core import ContactTracker, Freshness, RiskLevel, SignalKStore, TrackerConfig
from tests.fakes import FakeClock

OWN = "vessels.urn:mrn:imo:mmsi:230000001"
HEAD_ON = "urn:mrn:imo:mmsi:230123456"
ANCHORED = "urn:mrn:imo:mmsi:257000111"
LOST = "urn:mrn:imo:mmsi:265000222"


def _stamp(clock: FakeClock, age: float = 0.0) -> str:
    return (clock.now - timedelta(seconds=age)).isoformat().replace("+00:00", "Z")


def _delta(context, clock, age=0.0, position=None, cog=None, sog=None, name=None):
    values = []
    if position is not None:
        values.append({
            "path": "navigation.position",
            "value": {"latitude": position[0], "longitude": position[1]},
        })
    if cog is not None:
        values.append({"path": "navigation.courseOverGroundTrue", "value": cog})
    if sog is not None:
        values.append({"path": "navigation.speedOverGround", "value": sog})
    if name is not None:
        values.append({"path": "", "value": {"name": name}})
    return {
        "context": context,
        "updates": [{"source": {"label": "ais"}, "timestamp": _stamp(clock, age), "values": values}],
    }


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock) -> SignalKStore:
    return SignalKStore(self_context=OWN, clock=clock.wall)


@pytest.fixture()
def tracker(store, clock) -> ContactTracker:
    return ContactTracker(
        store,
        config=TrackerConfig(),
        clock=clock.wall,
        monotonic=clock.monotonic,
    )


@pytest.fixture()
def harbour(store, clock):
    """Own ship heading north at 5 m/s with three contacts around it."""
    store.apply_delta(_delta(OWN, clock, position=(59.90, 10.70), cog=0.0, sog=5.0))
    store.apply_delta(_delta(
        f"vessels.{HEAD_ON}", clock, position=(59.92, 10.70), cog=math.pi, sog=5.0, name="NORNE"
    ))
    store.apply_json(json.dumps(_delta(
        f"vessels.{ANCHORED}", clock, age=300.0, position=(59.90, 10.75), sog=0.0
    )))
    store.apply_delta(_delta(f"vessels.{LOST}", clock, age=1200.0, position=(59.88, 10.68)))
    return store


def _by_id(tracker):
    return {contact.identifier: contact for contact in tracker.tracked_contacts}


def test_first_cycle(harbour, tracker):
    assert tracker.on_telemetry_update()
    assert tracker.own_position_changed

    contacts = _by_id(tracker)
    assert set(contacts) == {HEAD_ON, ANCHORED}

    head_on = contacts[HEAD_ON]
    assert head_on.name == "NORNE"
    assert head_on.mmsi == "230123456"
    assert head_on.bearing == pytest.approx(0.0, abs=1e-6)
    assert head_on.distance == pytest.approx(2224.0, rel=1e-3)
    assert head_on.cpa == pytest.approx(0.0, abs=1.0)
    assert head_on.tcpa == pytest.approx(222.4, rel=1e-3)
    assert head_on.risk_level is RiskLevel.CRITICAL
    assert head_on.freshness is Freshness.LIVE

    assert contacts[ANCHORED].freshness is Freshness.STALE
    assert contacts[ANCHORED].age_minutes == pytest.approx(5.0)
    assert LOST not in harbour.get_live_contacts()


def test_small_cpa_change_keeps_cached_pair(harbour, tracker, clock):
    tracker.on_telemetry_update()
    first = _by_id(tracker)[HEAD_ON]

    clock.advance(1.0)
    harbour.apply_delta(_delta(f"vessels.{HEAD_ON}", clock, position=(59.9195, 10.7005)))
    assert tracker.on_telemetry_update()

    second = _by_id(tracker)[HEAD_ON]
    assert second.distance < first.distance
    assert (second.cpa, second.tcpa) == (first.cpa, first.tcpa)


def test_turning_away_updates_cpa(harbour, tracker, clock):
    tracker.on_telemetry_update()

    clock.advance(1.0)
    harbour.apply_delta(_delta(f"vessels.{HEAD_ON}", clock, cog=0.0, sog=10.0))
    tracker.on_telemetry_update()

    head_on = _by_id(tracker)[HEAD_ON]
    assert head_on.tcpa == 0.0
    assert head_on.cpa == pytest.approx(head_on.distance)
    assert not tracker.own_position_changed


def test_vanished_contact_is_swept(harbour, tracker, clock):
    tracker.on_telemetry_update()
    assert HEAD_ON in tracker.cache

    clock.advance(1.0)
    harbour.forget(HEAD_ON)
    tracker.on_telemetry_update()

    assert HEAD_ON not in _by_id(tracker)
    assert HEAD_ON not in tracker.cache


def test_contacts_age_out(harbour, tracker, clock):
    clock.advance(16 * 60)
    tracker.on_telemetry_update()
    assert tracker.tracked_contacts == ()
    assert len(tracker.cache) == 0
    assert harbour.get_live_contacts() == {}


def test_long_session_does_not_accumulate_contacts(store, tracker, clock):
    store.apply_delta(_delta(OWN, clock, position=(59.90, 10.70), cog=0.0, sog=5.0))
    for n in range(1000):
        store.apply_delta(_delta(
            f"vessels.urn:mrn:imo:mmsi:{230000100 + n}", clock,
            position=(59.90 + n * 1e-4, 10.71), cog=math.pi, sog=4.0,
        ))
    assert len(tracker.run_cycle()) == 1000

    clock.advance(3600)
    assert tracker.run_cycle() == []
    assert store.get_live_contacts() == {}
    assert len(tracker.cache) == 0


def test_burst_of_deltas_is_throttled(harbour, tracker, clock):
    assert tracker.on_telemetry_update()
    harbour.apply_delta(_delta(OWN, clock, position=(59.9001, 10.70)))
    assert not tracker.on_telemetry_update()

    clock.advance(0.5)
    assert tracker.on_telemetry_update()
    assert tracker.own_position_changed
