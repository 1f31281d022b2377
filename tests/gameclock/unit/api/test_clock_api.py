from __future__ import annotations

import logging

import pytest

from gameclock import create_game_clock as package_create_game_clock
from gameclock.api import (
    GameClock,
    MasterTimer,
    TimerHandle,
    create_game_clock,
    create_timer,
)
from gameclock.runtime.clock import RuntimeGameClock
from gameclock.runtime.config import ClockConfig
from gameclock.runtime.timer import RuntimeTimer
from tests.gameclock.conftest import FakeWallClock, RecordingTimer


@pytest.fixture(autouse=True)
def _isolated_logging(restore_logging) -> None:
    _ = restore_logging


def test_create_game_clock_applies_config() -> None:
    clock = create_game_clock(
        ClockConfig(desired_update_rate=30.0, slow_motion=0.5, advanced_timing=True),
        wall_clock=FakeWallClock(),
    )

    assert isinstance(clock, RuntimeGameClock)
    assert clock.desired_update_rate == 30.0
    assert clock.slow_motion == 0.5
    assert clock.advanced_timing is True
    assert clock.snapshot().timing.suggested_rate == 30


def test_create_game_clock_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("GAMECLOCK_DESIRED_UPDATE_RATE", "120")
    monkeypatch.delenv("GAMECLOCK_ADVANCED_TIMING", raising=False)

    clock = create_game_clock(wall_clock=FakeWallClock())

    assert clock.desired_update_rate == 120.0
    assert clock.advanced_timing is False


def test_package_exports_factory() -> None:
    assert package_create_game_clock is create_game_clock


def test_create_timer_returns_runtime_timer() -> None:
    timer = create_timer(FakeWallClock(), auto_destroy=False)
    assert isinstance(timer, RuntimeTimer)
    assert isinstance(timer, MasterTimer)
    assert isinstance(timer, TimerHandle)


def test_timer_doubles_satisfy_handle_contract() -> None:
    assert isinstance(RecordingTimer("a", []), TimerHandle)
    assert not isinstance(object(), TimerHandle)


def test_game_clock_contract_is_protocol() -> None:
    clock: GameClock = create_game_clock(ClockConfig(), wall_clock=FakeWallClock())
    clock.boot()
    clock.update(0.0)
    assert clock.snapshot().elapsed == 0.0


def test_create_game_clock_applies_config_log_level() -> None:
    create_game_clock(ClockConfig(log_level="ERROR"), wall_clock=FakeWallClock())

    assert logging.getLogger("gameclock").level == logging.ERROR
    assert not logging.getLogger("gameclock.clock").isEnabledFor(logging.INFO)


def test_create_game_clock_log_level_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("GAMECLOCK_LOG_LEVEL", "debug")

    create_game_clock(wall_clock=FakeWallClock())

    assert logging.getLogger("gameclock").level == logging.DEBUG
    assert logging.getLogger("gameclock.timers").isEnabledFor(logging.DEBUG)
