import math
from datetime import datetime, timezone

import numpy as np


def wrap_to_range(angle, min_val, max_val):
    """
    Wraps an angle into the half-open range [min_val, max_val).

    The span (max_val - min_val) is assumed to be a full circle (2*pi or 360).

    Args:
        angle (float): The angle value to wrap.
        min_val (float): Lower bound (inclusive).
        max_val (float): Upper bound (exclusive).

    Returns:
        float: The wrapped angle.
    """
    span = max_val - min_val
    if span <= 0:
        raise ValueError("max_val must be greater than min_val.")

    wrapped = (angle - min_val) % span + min_val

    # Float modulo can land exactly on the excluded upper bound
    if wrapped >= max_val:
        return float(min_val)

    return float(wrapped)


def WrapTo360(deg):
    """Transform an angle in degrees to the range [0, 360)."""
    return wrap_to_range(deg + 360.0, 0.0, 360.0)


def WrapTo180(deg):
    """Transform an angle in degrees to the range (-180, 180]."""
    rad = np.deg2rad(deg)
    return float(np.rad2deg(np.arctan2(np.sin(rad), np.cos(rad))))


def is_finite_number(value) -> bool:
    """True for int/float values that are neither NaN nor infinite (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware datetimes are returned unchanged."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
