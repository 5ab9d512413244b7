#!/usr/bin/env python3
"""
TCPA Calculation Demo for Head-on Scenario

This script places an AIS target dead ahead of own ship on reciprocal
courses and checks the geodesic CPA/TCPA against the closed form.

Scenario:
- Own ship: Course 0° (North), Speed 5.0 m/s
- Target ship: Course 180° (South), Speed 5.0 m/s
- Target TCPA: 300 seconds

Calculation Method:
TCPA = Distance / Relative_Speed
Where Relative_Speed = |V_own + V_target| = 10.0 m/s

Therefore: Distance = TCPA × Relative_Speed = 300 × 10.0 = 3000 meters
"""

import math

from ais_core import RiskAssessment, bearing, compute_cpa, distance
from ais_core.geometry import EARTH_RADIUS

OWN_LAT, OWN_LON = 59.90, 10.70


def calculate_head_on_distance(target_tcpa=300.0, own_speed=5.0, target_speed=5.0):
    """
    Initial range for a given TCPA with both ships closing head-on.
    """
    print("=" * 70)
    print("TCPA CALCULATION FOR HEAD-ON SCENARIO")
    print("=" * 70)

    relative_speed = own_speed + target_speed
    required_distance = target_tcpa * relative_speed

    print(f"\n[SCENARIO PARAMETERS]")
    print(f"Own Ship:    Course = 0° (North), Speed = {own_speed} m/s")
    print(f"Target Ship: Course = 180° (South), Speed = {target_speed} m/s")
    print(f"Target TCPA: {target_tcpa} seconds")
    print(f"\nRelative Speed: {own_speed} + {target_speed} = {relative_speed} m/s")
    print(f"Distance = {target_tcpa} × {relative_speed} = {required_distance} meters")

    return required_distance


def verify_with_ais_core(required_distance, own_speed=5.0, target_speed=5.0):
    """
    Place the target on the chart and let AIS Core compute CPA/TCPA.
    """
    print(f"\n[VERIFICATION USING AIS CORE]")
    print("-" * 50)

    # Target due north: latitude offset along the meridian
    target_lat = OWN_LAT + math.degrees(required_distance / EARTH_RADIUS)
    target_lon = OWN_LON

    target_bearing = bearing(OWN_LAT, OWN_LON, target_lat, target_lon)
    target_distance = distance(OWN_LAT, OWN_LON, target_lat, target_lon)

    print(f"Target Position: lat={target_lat:.5f}, lon={target_lon:.5f}")
    print(f"Bearing: {target_bearing:.2f}°  Range: {target_distance:.1f} m")

    result = compute_cpa(target_bearing, target_distance, 0.0, own_speed, 180.0, target_speed)

    print(f"\n[AIS CORE RESULTS]")
    print(f"CPA: {result.cpa:.2f} m")
    print(f"TCPA: {result.tcpa:.2f} s")

    risk = RiskAssessment().assess(result, target_distance)
    print(f"Risk Level: {risk.name}")

    return result.tcpa


def demonstrate_varying_distances(relative_speed=10.0):
    """
    How TCPA scales with the initial range.
    """
    print(f"\n[TCPA vs INITIAL DISTANCE]")
    print("-" * 50)
    print(f"Distance (m) | TCPA (s) | Time to CPA")
    print("-" * 40)

    for initial in [500, 1000, 1852, 3000, 3704, 6000, 9260]:
        tcpa = initial / relative_speed
        print(f"{initial:12.0f} | {tcpa:8.1f} | {tcpa/60:8.1f} min")


def main():
    required_distance = calculate_head_on_distance()
    calculated_tcpa = verify_with_ais_core(required_distance)
    demonstrate_varying_distances()

    print(f"\n" + "=" * 70)
    print(f"Required Initial Distance: {required_distance:.0f} meters")
    print(f"AIS Core TCPA = {calculated_tcpa:.1f} seconds "
          f"(error {abs(calculated_tcpa - 300.0):.2f} s)")
    print(f"=" * 70)


if __name__ == "__main__":
    main()
