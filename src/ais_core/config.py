"""
Tracker configuration, overridable from the environment.
"""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator


def _env_float(name: str, default: float):
    return lambda: float(os.getenv(name, str(default)).strip())


class TrackerConfig(BaseModel):
    prune_minutes: float = Field(default_factory=_env_float("AIS_CORE_PRUNE_MINUTES", 15.0))
    live_minutes: float = Field(default_factory=_env_float("AIS_CORE_LIVE_MINUTES", 3.0))
    stale_minutes: float = Field(default_factory=_env_float("AIS_CORE_STALE_MINUTES", 10.0))
    throttle_seconds: float = Field(default_factory=_env_float("AIS_CORE_THROTTLE_SECONDS", 0.5))
    hysteresis_min_abs: float = Field(default_factory=_env_float("AIS_CORE_HYSTERESIS_MIN_ABS", 50.0))
    hysteresis_min_rel: float = Field(default_factory=_env_float("AIS_CORE_HYSTERESIS_MIN_REL", 0.10))

    @model_validator(mode="after")
    def _check_thresholds(self) -> "TrackerConfig":
        if not 0 < self.live_minutes < self.stale_minutes <= self.prune_minutes:
            raise ValueError(
                "expected 0 < live_minutes < stale_minutes <= prune_minutes, got "
                f"{self.live_minutes}, {self.stale_minutes}, {self.prune_minutes}"
            )
        if self.throttle_seconds < 0:
            raise ValueError("throttle_seconds must be >= 0")
        if self.hysteresis_min_abs < 0 or self.hysteresis_min_rel < 0:
            raise ValueError("hysteresis thresholds must be >= 0")
        return self

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "TrackerConfig":
        """Load a .env file (if given or found) and build the config from the environment."""
        load_dotenv(dotenv_path=env_file)
        return cls()
