"""
Helpers for presenting tracked contacts on the polar chart and list view
"""
from typing import Iterable, List

from .types import TrackedContact

DEFAULT_RANGE = 9260.0      # meters (5 NM)
MIN_RANGE = 50.0            # meters
RANGE_PADDING = 1.2
ZOOM_STEP = 1.5


def sort_by_distance(contacts: Iterable[TrackedContact]) -> List[TrackedContact]:
    """Nearest contact first."""
    return sorted(contacts, key=lambda contact: contact.distance)


def auto_range(
    contacts: Iterable[TrackedContact],
    padding: float = RANGE_PADDING,
    default: float = DEFAULT_RANGE
) -> float:
    """
    Chart range that fits the farthest contact

    Returns:
        padding x farthest distance (meters), or `default` with no contacts
    """
    distances = [contact.distance for contact in contacts]
    if not distances:
        return default
    return max(max(distances) * padding, MIN_RANGE)


def zoom_in(range_m: float) -> float:
    return max(range_m / ZOOM_STEP, MIN_RANGE)


def zoom_out(range_m: float) -> float:
    return max(range_m * ZOOM_STEP, MIN_RANGE)


def format_age(seconds: float) -> str:
    """
    Compact time-since label: "45s", "12m", "3h"
    """
    seconds = max(int(seconds), 0)
    if seconds < 60:
        return f"{seconds}s"
    if seconds < 3600:
        return f"{seconds // 60}m"
    return f"{seconds // 3600}h"
