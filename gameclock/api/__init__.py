"""Public game clock API contracts."""

from gameclock.api.clock import ClockSnapshot, GameClock, TimingSnapshot, create_game_clock
from gameclock.api.logging import LoggingConfig
from gameclock.api.timers import (
    MasterTimer,
    TimerCallback,
    TimerFactory,
    TimerHandle,
    create_timer,
)

__all__ = [
    "ClockSnapshot",
    "GameClock",
    "LoggingConfig",
    "MasterTimer",
    "TimerCallback",
    "TimerFactory",
    "TimerHandle",
    "TimingSnapshot",
    "create_game_clock",
    "create_timer",
]
