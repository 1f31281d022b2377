"""Game clock configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from gameclock.runtime.fixed_step import DEFAULT_UPDATE_RATE


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _positive_float(name: str, default: float) -> float:
    value = _float(name, default)
    if value <= 0.0:
        return default
    return value


@dataclass(frozen=True, slots=True)
class ClockConfig:
    """Immutable game clock configuration."""

    desired_update_rate: float = DEFAULT_UPDATE_RATE
    slow_motion: float = 1.0
    advanced_timing: bool = False
    log_level: str = "INFO"


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with clock-prefixed override."""
    value = os.getenv("GAMECLOCK_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_clock_config() -> ClockConfig:
    """Load immutable clock configuration from env vars."""
    return ClockConfig(
        desired_update_rate=_positive_float("GAMECLOCK_DESIRED_UPDATE_RATE", DEFAULT_UPDATE_RATE),
        slow_motion=_positive_float("GAMECLOCK_SLOW_MOTION", 1.0),
        advanced_timing=_flag("GAMECLOCK_ADVANCED_TIMING", False),
        log_level=resolve_log_level_name(),
    )
