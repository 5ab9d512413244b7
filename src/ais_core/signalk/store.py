"""
In-memory SignalK snapshot fed by delta messages.

The host owns the websocket/REST plumbing and hands every received delta to
`SignalKStore.apply_delta`; the store keeps the latest own-ship values and
the latest report per AIS contact and serves them through the
`TelemetrySource` contract.
"""
from __future__ import annotations

import json
import logging
import math
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Mapping, Optional

from ..utils import WrapTo360, as_utc, is_finite_number
from .source import OwnPosition

logger = logging.getLogger(__name__)

SELF_CONTEXT = "vessels.self"
VESSELS_PREFIX = "vessels."

POSITION_PATH = "navigation.position"
COURSE_PATH = "navigation.courseOverGroundTrue"
SPEED_PATH = "navigation.speedOverGround"
NAME_PATH = "name"


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse a SignalK ISO 8601 timestamp ("...Z" allowed) into an aware datetime."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            logger.debug(f"Unparseable timestamp: {value!r}")
            return None
    else:
        return None

    return as_utc(parsed)


class SignalKStore:
    """
    Latest own-ship and AIS contact values from a SignalK delta stream

    Contact identifiers are the delta context without the "vessels." prefix,
    e.g. "urn:mrn:imo:mmsi:230123456".
    """

    def __init__(
        self,
        self_context: Optional[str] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Args:
            self_context: Full context of own ship (e.g. "vessels.urn:mrn:imo:mmsi:230000001");
                "vessels.self" and deltas without context always mean own ship
            clock: Fallback time source for updates that carry no timestamp
        """
        self.self_context = self_context
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._own: Dict[str, Any] = {}
        self._contacts: Dict[str, Dict[str, Any]] = {}

    # TelemetrySource

    def get_own_position(self) -> Optional[OwnPosition]:
        if "latitude" not in self._own or "longitude" not in self._own:
            return None
        return OwnPosition(
            latitude=self._own["latitude"],
            longitude=self._own["longitude"],
            timestamp=self._own.get("timestamp"),
        )

    def get_own_course_over_ground(self) -> Optional[float]:
        return self._own.get("courseOverGround")

    def get_own_speed_over_ground(self) -> Optional[float]:
        return self._own.get("speedOverGroundRaw")

    def get_live_contacts(self) -> Dict[str, Dict[str, Any]]:
        return {identifier: dict(data) for identifier, data in self._contacts.items()}

    # Delta ingestion

    def apply_json(self, text: str) -> int:
        """Apply a delta received as JSON text. Raises ValueError on invalid JSON."""
        try:
            message = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid SignalK message: {e}") from e
        return self.apply_delta(message)

    def apply_delta(self, delta: Mapping[str, Any]) -> int:
        """
        Apply one SignalK delta message

        Args:
            delta: {"context": ..., "updates": [{"timestamp": ..., "values": [...]}]}

        Returns:
            Number of values that were understood and stored
        """
        if not isinstance(delta, Mapping):
            logger.warning(f"Ignoring non-object SignalK message: {type(delta).__name__}")
            return 0

        updates = delta.get("updates")
        if not isinstance(updates, list):
            # hello / subscription acknowledgements carry no updates
            return 0

        context = delta.get("context")
        is_self = self._is_self(context)
        if is_self:
            target = self._own
        elif isinstance(context, str) and context.startswith(VESSELS_PREFIX):
            target = self._contacts.setdefault(context[len(VESSELS_PREFIX):], {})
        else:
            logger.debug(f"Ignoring delta for context {context!r}")
            return 0

        applied = 0
        for update in updates:
            if not isinstance(update, Mapping):
                continue
            timestamp = parse_timestamp(update.get("timestamp")) or self._clock()
            for item in update.get("values") or []:
                path = self._apply_value(target, item)
                if path is None:
                    continue
                applied += 1
                # Own-ship timestamp tracks the position fix, contacts track any report
                if not is_self or path == POSITION_PATH:
                    target["timestamp"] = timestamp

        return applied

    def clear(self) -> None:
        self._own.clear()
        self._contacts.clear()

    def forget(self, identifier: str) -> None:
        self._contacts.pop(identifier, None)

    def prune(self, older_than: timedelta, now: Optional[datetime] = None) -> int:
        """
        Drop contacts not heard from within `older_than`

        Contacts without a timestamp (no value was ever accepted for them)
        are dropped as well.

        Returns:
            Number of removed contacts
        """
        now = as_utc(now or self._clock())
        expired = [
            identifier for identifier, data in self._contacts.items()
            if data.get("timestamp") is None or now - data["timestamp"] > older_than
        ]
        for identifier in expired:
            del self._contacts[identifier]
        if expired:
            logger.debug(f"Pruned {len(expired)} contacts from the SignalK store")
        return len(expired)

    def _is_self(self, context: Any) -> bool:
        if context is None or context == "" or context == SELF_CONTEXT:
            return True
        return self.self_context is not None and context == self.self_context

    @staticmethod
    def _apply_value(target: Dict[str, Any], item: Any) -> Optional[str]:
        """Store one {"path", "value"} pair; returns the path if it was used."""
        if not isinstance(item, Mapping):
            return None
        path = item.get("path")
        value = item.get("value")

        if path == POSITION_PATH:
            if not isinstance(value, Mapping):
                return None
            lat, lon = value.get("latitude"), value.get("longitude")
            if not (is_finite_number(lat) and is_finite_number(lon)):
                return None
            target["latitude"] = float(lat)
            target["longitude"] = float(lon)
            return path

        if path == COURSE_PATH:
            if not is_finite_number(value):
                return None
            # SignalK angles are radians
            target["courseOverGround"] = WrapTo360(math.degrees(value))
            return path

        if path == SPEED_PATH:
            if not is_finite_number(value):
                return None
            target["speedOverGroundRaw"] = float(value)
            return path

        if path == NAME_PATH and isinstance(value, str):
            target["name"] = value
            return path

        if path == "" and isinstance(value, Mapping) and isinstance(value.get("name"), str):
            target["name"] = value["name"]
            return NAME_PATH

        return None
