"""
SignalK telemetry: the pull contract and an in-memory delta-fed store
"""

from .source import OwnPosition, TelemetrySource
from .store import SignalKStore, parse_timestamp

__all__ = [
    'OwnPosition',
    'TelemetrySource',
    'SignalKStore',
    'parse_timestamp',
]
