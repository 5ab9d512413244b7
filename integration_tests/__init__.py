"""
Integration tests for ais-core.

Drives the tracker from SignalK delta messages to verify:
- Delta ingestion into the telemetry store
- Contact pruning and freshness
- CPA hysteresis and cache sweeping across cycles
- Throttling of telemetry bursts
"""
