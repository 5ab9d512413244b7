"""
Course/speed and polar conversions in the NED frame (x=North, y=East)
"""
import numpy as np
from typing import Tuple

from ..utils import WrapTo180


def heading_speed_to_velocity(heading: float, speed: float) -> Tuple[float, float]:
    """
    Convert a course and speed into a velocity vector

    Args:
        heading: Course (degrees, 0=North, clockwise)
        speed: Speed (m/s)

    Returns:
        Velocity vector (v_north, v_east)
    """
    # heading=0 (North) -> (speed, 0); heading=90 (East) -> (0, speed)
    v_north = speed * np.cos(np.radians(heading))
    v_east = speed * np.sin(np.radians(heading))
    return float(v_north), float(v_east)


def velocity_to_heading_speed(velocity: Tuple[float, float]) -> Tuple[float, float]:
    """
    Convert a velocity vector back into course and speed

    Args:
        velocity: (v_north, v_east)

    Returns:
        (heading, speed)
        heading: degrees, (-180, 180], 0=North, clockwise
        speed: magnitude of velocity
    """
    v_north, v_east = velocity
    speed = float(np.hypot(v_north, v_east))
    heading = WrapTo180(np.degrees(np.arctan2(v_east, v_north)))
    return heading, speed


def polar_to_ned(bearing: float, distance: float) -> Tuple[float, float]:
    """
    Position of a target at (bearing, distance) from the origin

    Args:
        bearing: degrees, 0=North, clockwise
        distance: meters

    Returns:
        (north, east) in meters
    """
    return heading_speed_to_velocity(bearing, distance)
