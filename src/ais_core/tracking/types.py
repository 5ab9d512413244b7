"""
Contact tracking types
"""
import math
import re
from datetime import datetime
from enum import Enum
from typing import NamedTuple, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..risk.risk_matrix import RiskLevel
from ..utils import as_utc

_MMSI_PATTERN = re.compile(r"(?:^|:)(\d{9})$")


class Freshness(Enum):
    """
    Recency of a contact's last report
    """
    LIVE = "live"      # < 3 minutes
    STALE = "stale"    # 3 - 10 minutes
    OLD = "old"        # 10 minutes up to the prune threshold


class OwnShipState(NamedTuple):
    """
    Current own-ship kinematics
    """
    latitude: Optional[float]
    longitude: Optional[float]
    course_over_ground: Optional[float] = None   # degrees true
    speed_over_ground: Optional[float] = None    # m/s
    timestamp: Optional[datetime] = None


class ContactReport(BaseModel):
    """One raw AIS contact from the live snapshot."""

    latitude: float = Field(ge=-90.0, le=90.0, allow_inf_nan=False)
    longitude: float = Field(ge=-180.0, le=180.0, allow_inf_nan=False)
    name: Optional[str] = None
    course_over_ground: Optional[float] = Field(
        None, validation_alias=AliasChoices("courseOverGround", "course_over_ground", "cog")
    )
    speed_over_ground: Optional[float] = Field(
        None,
        validation_alias=AliasChoices(
            "speedOverGroundRaw", "speedOverGround", "speed_over_ground", "sog"
        ),
    )
    timestamp: Optional[datetime] = None

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("name", mode="before")
    @classmethod
    def _name_as_text(cls, value):
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("course_over_ground", "speed_over_ground")
    @classmethod
    def _drop_non_finite(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and not math.isfinite(value):
            return None
        return value

    @field_validator("timestamp")
    @classmethod
    def _assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value) if value is not None else None


class TrackedContact(NamedTuple):
    """
    A contact annotated for display, rebuilt every tracking cycle
    """
    identifier: str
    name: Optional[str]
    latitude: float
    longitude: float
    course_over_ground: Optional[float]
    speed_over_ground: Optional[float]
    timestamp: Optional[datetime]
    bearing: float                    # degrees from own ship, [0, 360)
    distance: float                   # meters from own ship
    freshness: Freshness
    cpa: Optional[float]              # meters, None if never determined
    tcpa: Optional[float]             # seconds
    age_minutes: float
    risk_level: Optional[RiskLevel] = None

    @property
    def mmsi(self) -> Optional[str]:
        """MMSI embedded in the identifier (e.g. urn:mrn:imo:mmsi:230123456)."""
        match = _MMSI_PATTERN.search(self.identifier)
        return match.group(1) if match else None

    @property
    def is_live(self) -> bool:
        return self.freshness is Freshness.LIVE
