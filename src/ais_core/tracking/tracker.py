"""
AIS contact tracker

Turns a raw contact snapshot plus own-ship state into the list of
risk-annotated contacts shown on the polar chart.
"""
import logging
import math
import threading
import time
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from ..config import TrackerConfig
from ..geometry import bearing_distance
from ..risk import CPACache, RiskAssessment, compute_cpa
from ..signalk.source import TelemetrySource
from ..utils import as_utc, is_finite_number
from .types import ContactReport, Freshness, OwnShipState, TrackedContact

logger = logging.getLogger(__name__)


def classify_freshness(age_minutes: float, config: TrackerConfig) -> Freshness:
    """LIVE below live_minutes, STALE below stale_minutes, OLD otherwise."""
    if age_minutes < config.live_minutes:
        return Freshness.LIVE
    if age_minutes < config.stale_minutes:
        return Freshness.STALE
    return Freshness.OLD


def contact_age_minutes(timestamp: Optional[datetime], now: datetime) -> float:
    """
    Minutes since a contact was last observed

    A missing timestamp counts as infinitely old; a timestamp ahead of
    `now` (clock skew between transponder and host) counts as age 0.
    Naive datetimes are taken as UTC.
    """
    if timestamp is None:
        return math.inf
    return max((as_utc(now) - as_utc(timestamp)).total_seconds() / 60.0, 0.0)


def _has_fix(own: Optional[OwnShipState]) -> bool:
    return (
        own is not None
        and is_finite_number(own.latitude)
        and is_finite_number(own.longitude)
    )


def track_contacts(
    own: Optional[OwnShipState],
    snapshot: Mapping[str, Any],
    cache: CPACache,
    now: datetime,
    config: Optional[TrackerConfig] = None,
    risk_assessment: Optional[RiskAssessment] = None
) -> List[TrackedContact]:
    """
    Run one tracking cycle

    Args:
        own: Own-ship state; without a position fix the cycle yields nothing
        snapshot: Raw contacts keyed by identifier
        cache: CPA cache owned by the caller, updated and swept in place
        now: Timezone-aware current time
        config: Thresholds (defaults from the environment)
        risk_assessment: Risk grader (defaults if omitted)

    Returns:
        Tracked contacts in snapshot order. Contacts without a usable
        position, without a timestamp or older than the prune threshold
        are left out and their cache entries swept.
    """
    if not _has_fix(own):
        return []

    config = config or TrackerConfig()
    risk_assessment = risk_assessment or RiskAssessment()

    tracked: List[TrackedContact] = []
    for identifier, raw in snapshot.items():
        identifier = str(identifier)
        try:
            report = ContactReport.model_validate(raw)
        except ValidationError as e:
            logger.debug(f"Skipping contact {identifier}: {e.error_count()} invalid field(s)")
            continue

        contact_bearing, contact_distance = bearing_distance(
            own.latitude, own.longitude, report.latitude, report.longitude
        )

        age = contact_age_minutes(report.timestamp, now)
        if age > config.prune_minutes:
            logger.debug(f"Dropping expired contact {identifier} (age {age:.1f} min)")
            continue

        computed = compute_cpa(
            contact_bearing, contact_distance,
            own.course_over_ground, own.speed_over_ground,
            report.course_over_ground, report.speed_over_ground
        )
        resolved = cache.resolve(identifier, computed)

        tracked.append(TrackedContact(
            identifier=identifier,
            name=report.name,
            latitude=report.latitude,
            longitude=report.longitude,
            course_over_ground=report.course_over_ground,
            speed_over_ground=report.speed_over_ground,
            timestamp=report.timestamp,
            bearing=contact_bearing,
            distance=contact_distance,
            freshness=classify_freshness(age, config),
            cpa=resolved.cpa if resolved else None,
            tcpa=resolved.tcpa if resolved else None,
            age_minutes=age,
            risk_level=risk_assessment.assess(resolved, contact_distance),
        ))

    cache.sweep(contact.identifier for contact in tracked)
    return tracked


def _finite_or_none(value) -> Optional[float]:
    return float(value) if is_finite_number(value) else None


class ContactTracker:
    """
    Keeps the tracked contact list current for one own ship

    The host calls `on_telemetry_update` from its event loop whenever the
    telemetry service reports new data. Updates closer together than
    `config.throttle_seconds` are dropped. The CPA cache survives across
    cycles until `reset` is called.
    """

    def __init__(
        self,
        telemetry: TelemetrySource,
        config: Optional[TrackerConfig] = None,
        clock: Optional[Callable[[], datetime]] = None,
        monotonic: Optional[Callable[[], float]] = None,
        risk_assessment: Optional[RiskAssessment] = None
    ):
        """
        Args:
            telemetry: Source of own-ship state and the live contact snapshot
            config: Tracker thresholds
            clock: Wall clock returning aware datetimes (for contact ages)
            monotonic: Monotonic clock in seconds (for throttling)
            risk_assessment: Risk grader applied to each contact
        """
        self.telemetry = telemetry
        self.config = config or TrackerConfig()
        self.risk_assessment = risk_assessment or RiskAssessment()
        self.cache = CPACache(
            min_abs=self.config.hysteresis_min_abs,
            min_rel=self.config.hysteresis_min_rel
        )
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._monotonic = monotonic or time.monotonic

        # Cycles must never interleave over the same cache
        self._lock = threading.RLock()
        self._last_update: Optional[float] = None
        self._previous_position: Optional[Tuple[float, float]] = None
        self._tracked: Tuple[TrackedContact, ...] = ()
        self.own_position_changed = False

    @property
    def tracked_contacts(self) -> Tuple[TrackedContact, ...]:
        """Output of the latest cycle (unordered; sort by distance for display)."""
        return self._tracked

    def on_telemetry_update(self) -> bool:
        """
        Entry point for telemetry notifications

        Returns:
            True if a tracking cycle ran, False if the update was throttled
        """
        with self._lock:
            now = self._monotonic()
            if (self._last_update is not None
                    and now - self._last_update < self.config.throttle_seconds):
                logger.debug("Telemetry update throttled")
                return False
            self._last_update = now
            self.run_cycle()
            return True

    def read_own_ship(self) -> Optional[OwnShipState]:
        position = self.telemetry.get_own_position()
        if position is None:
            return None
        return OwnShipState(
            latitude=_finite_or_none(position.latitude),
            longitude=_finite_or_none(position.longitude),
            course_over_ground=_finite_or_none(self.telemetry.get_own_course_over_ground()),
            speed_over_ground=_finite_or_none(self.telemetry.get_own_speed_over_ground()),
            timestamp=position.timestamp,
        )

    def run_cycle(self, now: Optional[datetime] = None) -> List[TrackedContact]:
        """Run one tracking cycle immediately, bypassing the throttle."""
        with self._lock:
            now = as_utc(now or self._clock())
            self._prune_telemetry(now)
            own = self.read_own_ship()

            if not _has_fix(own):
                self.own_position_changed = False
                self._tracked = ()
                return []

            position = (own.latitude, own.longitude)
            self.own_position_changed = position != self._previous_position
            self._previous_position = position

            contacts = track_contacts(
                own, self.telemetry.get_live_contacts(), self.cache, now,
                self.config, self.risk_assessment
            )
            self._tracked = tuple(contacts)
            return contacts

    def _prune_telemetry(self, now: datetime) -> None:
        # Stores that keep every contact ever heard (SignalKStore) expose prune
        prune = getattr(self.telemetry, "prune", None)
        if callable(prune):
            prune(timedelta(minutes=self.config.prune_minutes), now)

    def reset(self) -> None:
        """Forget all cross-cycle state, e.g. after reconnecting to another own ship."""
        with self._lock:
            logger.info("Resetting contact tracker")
            self.cache.clear()
            self._last_update = None
            self._previous_position = None
            self._tracked = ()
            self.own_position_changed = False
