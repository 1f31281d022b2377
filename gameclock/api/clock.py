"""Public game clock API contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from gameclock.api.timers import MasterTimer, TimerFactory, TimerHandle

if TYPE_CHECKING:
    from gameclock.runtime.config import ClockConfig


@dataclass(frozen=True, slots=True)
class TimingSnapshot:
    """Read-only view of the advanced timing statistics."""

    frames: int
    updates: int
    renders: int
    fps: int
    ups: int
    rps: int
    fps_min: int
    fps_max: int
    ms_min: float
    ms_max: float
    suggested_rate: int


@dataclass(frozen=True, slots=True)
class ClockSnapshot:
    """Read-only view of clock state consumable by overlays and loggers."""

    wall_time: float
    previous_wall_time: float
    wall_delta_ms: float
    now: float
    previous_now: float
    elapsed: float
    desired_update_rate: float
    physics_elapsed_seconds: float
    physics_elapsed_ms: float
    update_rate_multiplier: float
    slow_motion: float
    pause_duration_ms: float
    next_call_delay_ms: float
    expected_next_call_at: float
    advanced_timing: bool
    timing: TimingSnapshot


class GameClock(Protocol):
    """Authoritative per-frame clock contract."""

    events: MasterTimer
    slow_motion: float
    advanced_timing: bool

    @property
    def desired_update_rate(self) -> float:
        """Return desired logic update rate."""

    @desired_update_rate.setter
    def desired_update_rate(self, value: float) -> None:
        """Set desired rate and recompute fixed-step values."""

    def boot(self) -> None:
        """Capture the session start and start the master timer."""

    def update(self, now: float) -> None:
        """Advance the clock for one scheduler frame."""

    def refresh(self) -> None:
        """Resample wall time outside of the frame cadence."""

    def add(self, timer: TimerHandle) -> TimerHandle:
        """Add an existing timer to the pool."""

    def create(self, auto_destroy: bool = True) -> TimerHandle:
        """Create and pool a new timer."""

    def remove_all(self) -> None:
        """Destroy pooled timers and clear master timer events."""

    def reset(self) -> None:
        """Restart the session reference and drop every pooled timer."""

    def game_paused(self) -> None:
        """Handle the host entering its paused state."""

    def game_resumed(self) -> None:
        """Handle the host leaving its paused state."""

    def count_update(self) -> None:
        """Count one logic update."""

    def count_render(self) -> None:
        """Count one render."""

    def total_elapsed_seconds(self) -> float:
        """Return seconds since the session start."""

    def elapsed_since(self, since: float) -> float:
        """Return wall milliseconds since `since`."""

    def elapsed_seconds_since(self, since: float) -> float:
        """Return wall seconds since `since` (given in milliseconds)."""

    def snapshot(self) -> ClockSnapshot:
        """Return current observable clock state."""


def create_game_clock(
    config: ClockConfig | None = None,
    *,
    wall_clock: Callable[[], float] | None = None,
    host_paused: Callable[[], bool] | None = None,
    uses_fixed_delay: Callable[[], bool] | None = None,
    timer_factory: TimerFactory | None = None,
    master_timer: MasterTimer | None = None,
) -> GameClock:
    """Create default game clock, reading config from the environment if omitted.

    The config log level is applied to the `gameclock` logger hierarchy.
    """
    from gameclock.runtime.clock import RuntimeGameClock
    from gameclock.runtime.config import load_clock_config
    from gameclock.runtime.logging import setup_logging

    resolved = config if config is not None else load_clock_config()
    setup_logging(resolved.log_level)
    return RuntimeGameClock(
        desired_update_rate=resolved.desired_update_rate,
        slow_motion=resolved.slow_motion,
        advanced_timing=resolved.advanced_timing,
        wall_clock=wall_clock,
        host_paused=host_paused,
        uses_fixed_delay=uses_fixed_delay,
        timer_factory=timer_factory,
        master_timer=master_timer,
    )
