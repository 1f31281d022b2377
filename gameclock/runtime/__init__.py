"""Game clock runtime modules."""

from gameclock.runtime.clock import RuntimeGameClock, wall_clock_ms
from gameclock.runtime.config import ClockConfig, load_clock_config
from gameclock.runtime.fixed_step import DEFAULT_UPDATE_RATE, FixedStepParameters
from gameclock.runtime.logging import configure_logging, get_logger, setup_logging
from gameclock.runtime.statistics import TimingStatistics
from gameclock.runtime.timer import RuntimeTimer
from gameclock.runtime.timer_pool import TimerPool

__all__ = [
    "ClockConfig",
    "DEFAULT_UPDATE_RATE",
    "FixedStepParameters",
    "RuntimeGameClock",
    "RuntimeTimer",
    "TimerPool",
    "TimingStatistics",
    "configure_logging",
    "get_logger",
    "load_clock_config",
    "setup_logging",
    "wall_clock_ms",
]
