"""
Great-circle geodesy on a spherical earth (WGS84 coordinates, no ellipsoid correction)
"""
import numpy as np
from typing import Tuple

from ..utils import WrapTo360

EARTH_RADIUS = 6371000.0  # meters


def bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Initial great-circle bearing from point 1 to point 2

    Args:
        lat1, lon1: Start point (decimal degrees)
        lat2, lon2: End point (decimal degrees)

    Returns:
        Bearing in degrees, [0, 360), 0=North, clockwise.
        Coincident points give 0.
    """
    lat1_rad = np.radians(lat1)
    lat2_rad = np.radians(lat2)
    d_lon = np.radians(lon2 - lon1)

    y = np.sin(d_lon) * np.cos(lat2_rad)
    x = (np.cos(lat1_rad) * np.sin(lat2_rad)
         - np.sin(lat1_rad) * np.cos(lat2_rad) * np.cos(d_lon))

    return WrapTo360(float(np.degrees(np.arctan2(y, x))))


def distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Haversine distance between two points

    Args:
        lat1, lon1: First point (decimal degrees)
        lat2, lon2: Second point (decimal degrees)

    Returns:
        Distance in meters, >= 0. Coincident points give exactly 0.
    """
    lat1_rad = np.radians(lat1)
    lat2_rad = np.radians(lat2)
    d_lat = np.radians(lat2 - lat1)
    d_lon = np.radians(lon2 - lon1)

    a = (np.sin(d_lat / 2) ** 2
         + np.cos(lat1_rad) * np.cos(lat2_rad) * np.sin(d_lon / 2) ** 2)
    # Rounding can push a a hair outside [0, 1] near antipodes
    a = min(max(float(a), 0.0), 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    return float(EARTH_RADIUS * c)


def bearing_distance(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> Tuple[float, float]:
    """(bearing, distance) from point 1 to point 2."""
    return bearing(lat1, lon1, lat2, lon2), distance(lat1, lon1, lat2, lon2)
