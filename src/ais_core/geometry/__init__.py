"""
Geometry utilities for maritime navigation
"""

from .geodesy import (
    EARTH_RADIUS,
    bearing,
    distance,
    bearing_distance,
)

from .bearings import (
    heading_speed_to_velocity,
    velocity_to_heading_speed,
    polar_to_ned,
)

__all__ = [
    # geodesy
    'EARTH_RADIUS',
    'bearing',
    'distance',
    'bearing_distance',
    # bearings
    'heading_speed_to_velocity',
    'velocity_to_heading_speed',
    'polar_to_ned',
]
