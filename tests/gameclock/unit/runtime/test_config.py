from __future__ import annotations

import pytest

from gameclock.runtime.config import (
    ClockConfig,
    load_clock_config,
    resolve_log_level_name,
)

_ENV_NAMES = (
    "GAMECLOCK_DESIRED_UPDATE_RATE",
    "GAMECLOCK_SLOW_MOTION",
    "GAMECLOCK_ADVANCED_TIMING",
    "GAMECLOCK_LOG_LEVEL",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_load_clock_config_defaults() -> None:
    assert load_clock_config() == ClockConfig()


def test_load_clock_config_parses_values(monkeypatch) -> None:
    monkeypatch.setenv("GAMECLOCK_DESIRED_UPDATE_RATE", "144")
    monkeypatch.setenv("GAMECLOCK_SLOW_MOTION", "2.5")
    monkeypatch.setenv("GAMECLOCK_ADVANCED_TIMING", "yes")
    monkeypatch.setenv("GAMECLOCK_LOG_LEVEL", "debug")

    cfg = load_clock_config()
    assert cfg.desired_update_rate == 144.0
    assert cfg.slow_motion == 2.5
    assert cfg.advanced_timing is True
    assert cfg.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["0", "-30", "fast"])
def test_invalid_update_rate_falls_back_to_default(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("GAMECLOCK_DESIRED_UPDATE_RATE", raw)
    assert load_clock_config().desired_update_rate == 60.0


def test_resolve_log_level_prefers_clock_prefix(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    assert resolve_log_level_name() == "WARNING"
    monkeypatch.setenv("GAMECLOCK_LOG_LEVEL", "ERROR")
    assert resolve_log_level_name() == "ERROR"
