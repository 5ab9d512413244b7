"""
AIS Core - AIS Contact Tracking and CPA/TCPA Collision Risk

Tracks AIS contacts around own ship from SignalK telemetry and annotates
each with bearing, range, freshness and a hysteresis-filtered CPA/TCPA.
"""

from .config import TrackerConfig
from .geometry import bearing, distance, heading_speed_to_velocity
from .risk import CPAResult, CPACache, RiskLevel, RiskAssessment, compute_cpa, calculate_cpa_tcpa
from .tracking import (
    ContactTracker,
    Freshness,
    OwnShipState,
    TrackedContact,
    track_contacts,
)
from .signalk import OwnPosition, SignalKStore, TelemetrySource


__version__ = "0.1.0"
__author__ = "Maritime Robotics Lab"

__all__ = [
    # Main classes
    "ContactTracker",
    "SignalKStore",
    "TrackerConfig",
    "CPACache",
    "RiskAssessment",

    # Functions
    "bearing",
    "distance",
    "heading_speed_to_velocity",
    "compute_cpa",
    "calculate_cpa_tcpa",
    "track_contacts",

    # Types and enums
    "CPAResult",
    "Freshness",
    "OwnShipState",
    "OwnPosition",
    "TrackedContact",
    "RiskLevel",
    "TelemetrySource",
]
