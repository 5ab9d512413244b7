"""
Contact tracking: per-cycle assembly of risk-annotated AIS contacts
"""

from .types import (
    Freshness,
    OwnShipState,
    ContactReport,
    TrackedContact,
)

from .tracker import (
    ContactTracker,
    classify_freshness,
    contact_age_minutes,
    track_contacts,
)

from .display import (
    sort_by_distance,
    auto_range,
    zoom_in,
    zoom_out,
    format_age,
)

__all__ = [
    # types
    'Freshness',
    'OwnShipState',
    'ContactReport',
    'TrackedContact',
    # tracker
    'ContactTracker',
    'classify_freshness',
    'contact_age_minutes',
    'track_contacts',
    # display
    'sort_by_distance',
    'auto_range',
    'zoom_in',
    'zoom_out',
    'format_age',
]
