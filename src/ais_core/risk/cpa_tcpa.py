"""
Closest Point of Approach (CPA) and Time to CPA (TCPA)

Both vessels are assumed to hold course and speed (linear relative motion).
"""
import math
import numpy as np
from typing import NamedTuple, Optional, Tuple

from ..geometry import heading_speed_to_velocity, polar_to_ned

# Below this speed (m/s) a vessel is treated as stationary
MIN_SPEED = 0.01

# Below this squared relative speed ((m/s)^2) the vessels never converge
PARALLEL_EPSILON = 1e-4


class CPAResult(NamedTuple):
    """
    CPA/TCPA pair
    """
    cpa: float    # Distance at CPA (meters)
    tcpa: float   # Time to CPA (seconds); inf = never converges, 0 = already diverging

    @property
    def converging(self) -> bool:
        """True while the closest approach still lies ahead."""
        return 0.0 < self.tcpa < math.inf


def _extract_coords(vec) -> Tuple[float, float]:
    if isinstance(vec, np.ndarray):
        flat = vec.reshape(-1)
        return float(flat[0]), float(flat[1])
    return float(vec[0]), float(vec[1])


def calculate_cpa_tcpa(
    os_position: Tuple[float, float],
    os_velocity: Tuple[float, float],
    ts_position: Tuple[float, float],
    ts_velocity: Tuple[float, float]
) -> CPAResult:
    """
    CPA and TCPA from NED position and velocity vectors

    TCPA = -(P_rel . V_rel) / ||V_rel||^2
    DCPA = || P_rel + V_rel * TCPA ||

    where P_rel = P_T - P_O and V_rel = V_T - V_O.

    Args:
        os_position: Own Ship position (north, east) in meters
        os_velocity: Own Ship velocity (v_north, v_east) in m/s
        ts_position: Target Ship position (north, east) in meters
        ts_velocity: Target Ship velocity (v_north, v_east) in m/s

    Returns:
        CPAResult

    Notes:
        - ||V_rel||^2 < PARALLEL_EPSILON: parallel or both stationary,
          CPA = current distance, TCPA = inf
        - TCPA <= 0: closest approach reached or passed, CPA = current distance,
          TCPA = 0
    """
    os_n, os_e = _extract_coords(os_position)
    ts_n, ts_e = _extract_coords(ts_position)
    os_vn, os_ve = _extract_coords(os_velocity)
    ts_vn, ts_ve = _extract_coords(ts_velocity)

    dx = ts_n - os_n
    dy = ts_e - os_e

    dvx = ts_vn - os_vn
    dvy = ts_ve - os_ve

    current_distance = float(np.hypot(dx, dy))
    rel_speed_sq = dvx**2 + dvy**2

    if rel_speed_sq < PARALLEL_EPSILON:
        return CPAResult(current_distance, math.inf)

    tcpa = -(dx * dvx + dy * dvy) / rel_speed_sq

    # tcpa == 0 also covers -0.0 from a perpendicular approach
    if tcpa <= 0:
        return CPAResult(current_distance, 0.0)

    cpa_dx = dx + dvx * tcpa
    cpa_dy = dy + dvy * tcpa

    return CPAResult(float(np.hypot(cpa_dx, cpa_dy)), float(tcpa))


def compute_cpa(
    bearing: float,
    distance: float,
    own_cog: Optional[float],
    own_sog: Optional[float],
    target_cog: Optional[float],
    target_sog: Optional[float]
) -> Optional[CPAResult]:
    """
    CPA/TCPA of a target seen at (bearing, distance) from own ship

    Args:
        bearing: True bearing own ship -> target (degrees)
        distance: Current range (meters)
        own_cog: Own course over ground (degrees), None if unknown
        own_sog: Own speed over ground (m/s), None is treated as 0
        target_cog: Target course over ground (degrees), None if unknown
        target_sog: Target speed over ground (m/s), None is treated as 0

    Returns:
        CPAResult, or None when own ship is moving without a known course
        (undetermined). A target without course is treated as stationary.
    """
    own_speed = own_sog if own_sog is not None else 0.0
    if own_speed <= MIN_SPEED:
        own_velocity = (0.0, 0.0)
    elif own_cog is None:
        return None
    else:
        own_velocity = heading_speed_to_velocity(own_cog, own_speed)

    target_speed = target_sog if target_sog is not None else 0.0
    if target_speed <= MIN_SPEED or target_cog is None:
        target_velocity = (0.0, 0.0)
    else:
        target_velocity = heading_speed_to_velocity(target_cog, target_speed)

    result = calculate_cpa_tcpa(
        (0.0, 0.0), own_velocity,
        polar_to_ned(bearing, distance), target_velocity
    )

    # Not approaching: report the measured range, not the re-projected one
    if not result.converging:
        return CPAResult(float(distance), result.tcpa)
    return result
