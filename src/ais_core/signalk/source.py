"""
Telemetry contract consumed by the contact tracker.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, NamedTuple, Optional, Protocol


class OwnPosition(NamedTuple):
    latitude: float
    longitude: float
    timestamp: Optional[datetime] = None


class TelemetrySource(Protocol):
    """
    Pull-based view of a SignalK-style data service.

    Courses are degrees true, speeds m/s. `get_live_contacts` returns a
    snapshot keyed by contact identifier; each value is a dict with
    `latitude`, `longitude` and optionally `name`, `courseOverGround`,
    `speedOverGroundRaw` and `timestamp`.

    A source that accumulates contacts may also define
    `prune(older_than: timedelta, now: datetime)`; the tracker calls it at
    the start of every cycle with the prune threshold.
    """

    def get_own_position(self) -> Optional[OwnPosition]: ...

    def get_own_course_over_ground(self) -> Optional[float]: ...

    def get_own_speed_over_ground(self) -> Optional[float]: ...

    def get_live_contacts(self) -> Mapping[str, Mapping[str, Any]]: ...
