"""
AIS Core - Quick Start Example

Feed a few SignalK deltas into the store and print the tracked contacts
"""
import math
from datetime import datetime, timezone

from ais_core import ContactTracker, SignalKStore
from ais_core.tracking import auto_range, format_age, sort_by_distance


def position_delta(context, lat, lon, cog=None, sog=None, name=None):
    values = [{"path": "navigation.position", "value": {"latitude": lat, "longitude": lon}}]
    if cog is not None:
        values.append({"path": "navigation.courseOverGroundTrue", "value": math.radians(cog)})
    if sog is not None:
        values.append({"path": "navigation.speedOverGround", "value": sog})
    if name is not None:
        values.append({"path": "", "value": {"name": name}})
    return {
        "context": context,
        "updates": [{"timestamp": datetime.now(timezone.utc).isoformat(), "values": values}],
    }


def main():
    print("=" * 60)
    print("AIS Core - Quick Start")
    print("=" * 60)

    # 1. Telemetry store + tracker
    store = SignalKStore()
    tracker = ContactTracker(store)

    # 2. Own ship (Oslofjord, heading north at 5 m/s)
    print("\n[Own Ship]")
    store.apply_delta(position_delta("vessels.self", 59.90, 10.70, cog=0.0, sog=5.0))
    own = tracker.read_own_ship()
    print(f"Own Ship: lat={own.latitude:.4f}, lon={own.longitude:.4f}, "
          f"cog={own.course_over_ground:.0f}°, sog={own.speed_over_ground} m/s")

    # 3. AIS contacts
    store.apply_delta(position_delta(
        "vessels.urn:mrn:imo:mmsi:230123456", 59.92, 10.70, cog=180.0, sog=5.0, name="NORNE"))
    store.apply_delta(position_delta(
        "vessels.urn:mrn:imo:mmsi:257000111", 59.91, 10.74, cog=270.0, sog=2.0, name="SKARV"))
    store.apply_delta(position_delta(
        "vessels.urn:mrn:imo:mmsi:265000222", 59.88, 10.66, name="ANKER"))

    # 4. Tracking cycle
    tracker.on_telemetry_update()
    contacts = sort_by_distance(tracker.tracked_contacts)

    print(f"\n[Contacts] chart range {auto_range(contacts):.0f} m")
    for contact in contacts:
        print(f"\n{contact.name} ({contact.mmsi}), {contact.freshness.value}, "
              f"seen {format_age(contact.age_minutes * 60)} ago")
        print(f"  Bearing: {contact.bearing:.1f}°  Range: {contact.distance:.0f} m")
        if contact.cpa is None:
            print("  CPA: --")
        elif math.isinf(contact.tcpa):
            print(f"  CPA: {contact.cpa:.0f} m (never closer)")
        else:
            print(f"  CPA: {contact.cpa:.0f} m ({contact.cpa / 1852:.2f} NM) "
                  f"in {contact.tcpa:.0f} s ({contact.tcpa / 60:.1f} min)")
        if contact.risk_level is None:
            continue
        print(f"  Risk: {contact.risk_level.name}")
        if contact.risk_level.is_dangerous:
            print("  ⚠️  Close approach ahead!")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
