"""Authoritative per-frame game clock.

Three notions of time are tracked here:

- wall time: milliseconds from the host wall clock, sampled every update and
  on pause transitions; it keeps advancing while the host is paused.
- now: the monotonic frame timestamp handed in by the frame scheduler; only
  comparable within one session. `elapsed` is derived from it.
- physics time: the fixed per-update slice derived from the desired update
  rate, used for deterministic simulation stepping.

Timers (the master timer and the pool) are driven by wall time and only
advance while the host is not paused.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable

from gameclock.api.clock import ClockSnapshot
from gameclock.api.timers import MasterTimer, TimerFactory, TimerHandle, create_timer
from gameclock.runtime.fixed_step import DEFAULT_UPDATE_RATE, FixedStepParameters
from gameclock.runtime.statistics import TimingStatistics
from gameclock.runtime.timer_pool import TimerPool

_LOG = logging.getLogger("gameclock.clock")


def wall_clock_ms() -> float:
    """Return host wall time in whole milliseconds."""
    return float(time.time_ns() // 1_000_000)


def _never() -> bool:
    return False


class RuntimeGameClock:
    """Game clock driven once per frame by an external scheduler."""

    def __init__(
        self,
        *,
        desired_update_rate: float = DEFAULT_UPDATE_RATE,
        slow_motion: float = 1.0,
        advanced_timing: bool = False,
        wall_clock: Callable[[], float] | None = None,
        host_paused: Callable[[], bool] | None = None,
        uses_fixed_delay: Callable[[], bool] | None = None,
        timer_factory: TimerFactory | None = None,
        master_timer: MasterTimer | None = None,
    ) -> None:
        self._wall_clock = wall_clock or wall_clock_ms
        self._host_paused = host_paused or _never
        self._uses_fixed_delay = uses_fixed_delay or _never
        self._timer_factory = timer_factory or self._create_runtime_timer

        self._wall_time = 0.0
        self._previous_wall_time = 0.0
        self._wall_delta_ms = 0.0
        self._now = 0.0
        self._previous_now = 0.0
        self._now_seeded = False
        self._elapsed = 0.0
        self._started_at = 0.0
        self._pause_started_at = 0.0
        self._pause_duration_ms = 0.0
        self._next_call_delay_ms = 0.0
        self._expected_next_call_at = 0.0

        self._fixed_step = FixedStepParameters.from_rate(desired_update_rate)
        self.slow_motion = slow_motion
        self.advanced_timing = advanced_timing
        self._statistics = TimingStatistics(suggested_rate=desired_update_rate)

        self._pool = TimerPool()
        self.events: MasterTimer = master_timer or create_timer(
            self._current_wall_time,
            auto_destroy=False,
        )

    @property
    def desired_update_rate(self) -> float:
        return self._fixed_step.rate

    @desired_update_rate.setter
    def desired_update_rate(self, value: float) -> None:
        """Set the logic update rate; `value` must be > 0."""
        self._fixed_step = FixedStepParameters.from_rate(value)

    @property
    def fixed_step(self) -> FixedStepParameters:
        return self._fixed_step

    @property
    def physics_elapsed_seconds(self) -> float:
        return self._fixed_step.physics_elapsed_seconds

    @property
    def physics_elapsed_ms(self) -> float:
        return self._fixed_step.physics_elapsed_ms

    @property
    def update_rate_multiplier(self) -> float:
        return self._fixed_step.update_rate_multiplier

    @property
    def wall_time(self) -> float:
        return self._wall_time

    @property
    def previous_wall_time(self) -> float:
        return self._previous_wall_time

    @property
    def wall_delta_ms(self) -> float:
        return self._wall_delta_ms

    @property
    def now(self) -> float:
        return self._now

    @property
    def previous_now(self) -> float:
        return self._previous_now

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def pause_duration_ms(self) -> float:
        return self._pause_duration_ms

    @property
    def next_call_delay_ms(self) -> float:
        return self._next_call_delay_ms

    @property
    def expected_next_call_at(self) -> float:
        return self._expected_next_call_at

    @property
    def is_paused(self) -> bool:
        return self._host_paused()

    @property
    def statistics(self) -> TimingStatistics:
        return self._statistics

    @property
    def timers(self) -> tuple[TimerHandle, ...]:
        return self._pool.timers

    def boot(self) -> None:
        """Capture the session start and start the master timer."""
        self._started_at = self._wall_clock()
        self._wall_time = self._started_at
        self._previous_wall_time = self._wall_time
        self.events.start()
        self._expected_next_call_at = self._wall_time
        _LOG.info(
            "clock_boot desired_update_rate=%s advanced_timing=%s",
            self.desired_update_rate,
            self.advanced_timing,
        )

    def add(self, timer: TimerHandle) -> TimerHandle:
        """Add an existing timer to the pool and return it."""
        return self._pool.add(timer)

    def create(self, auto_destroy: bool = True) -> TimerHandle:
        """Create a pooled timer; auto-destroying timers leave the pool once spent."""
        return self._pool.add(self._timer_factory(auto_destroy))

    def remove_all(self) -> None:
        """Destroy every pooled timer and clear the master timer's events."""
        count = len(self._pool)
        self._pool.destroy_all()
        self.events.remove_all()
        _LOG.debug("timers_removed count=%d", count)

    def refresh(self) -> None:
        """Resample wall time and its delta without touching `now`."""
        previous_wall_time = self._wall_time
        self._wall_time = self._wall_clock()
        self._previous_wall_time = previous_wall_time
        self._wall_delta_ms = self._wall_time - previous_wall_time

    def update(self, now: float) -> None:
        """Advance the clock for one frame of the external scheduler.

        `previous_now` is undefined at boot: the scheduler supplies no
        timestamp there. The first call after construction seeds it with
        `now` itself, so the first frame reports `elapsed == 0` rather than
        a delta against an implicit zero.
        """
        self.refresh()

        self._previous_now = self._now if self._now_seeded else now
        self._now = now
        self._now_seeded = True
        self._elapsed = self._now - self._previous_now

        if self._uses_fixed_delay():
            self._update_fallback_cadence(now)

        if self.advanced_timing:
            self._statistics.sample(
                now=self._now,
                elapsed=self._elapsed,
                desired_update_rate=self.desired_update_rate,
            )

        if self._host_paused():
            return
        self.events.advance(self._wall_time)
        if self._pool:
            self._pool.advance(self._wall_time)

    def count_update(self) -> None:
        if self.advanced_timing:
            self._statistics.count_update()

    def count_render(self) -> None:
        if self.advanced_timing:
            self._statistics.count_render()

    def reset_extrema(self) -> None:
        """Forget fps and frame-duration extrema."""
        self._statistics.reset_extrema()

    def game_paused(self) -> None:
        """Record the pause start and pause every timer."""
        self._wall_time = self._wall_clock()
        self._pause_started_at = self._wall_time
        self.events.pause()
        self._pool.pause_all()
        _LOG.debug("clock_paused wall_time=%s timers=%d", self._wall_time, len(self._pool))

    def game_resumed(self) -> None:
        """Measure the pause and resume every timer."""
        # Resampled so the next update sees a wall delta of about zero.
        self._wall_time = self._wall_clock()
        self._pause_duration_ms = self._wall_time - self._pause_started_at
        self.events.resume()
        self._pool.resume_all()
        _LOG.debug(
            "clock_resumed pause_duration_ms=%s timers=%d",
            self._pause_duration_ms,
            len(self._pool),
        )

    def total_elapsed_seconds(self) -> float:
        return (self._wall_time - self._started_at) * 0.001

    def elapsed_since(self, since: float) -> float:
        return self._wall_time - since

    def elapsed_seconds_since(self, since: float) -> float:
        return (self._wall_time - since) * 0.001

    def reset(self) -> None:
        """Restart the session reference and remove all timers."""
        self._started_at = self._wall_time
        self.remove_all()
        _LOG.info("clock_reset wall_time=%s", self._wall_time)

    def snapshot(self) -> ClockSnapshot:
        return ClockSnapshot(
            wall_time=self._wall_time,
            previous_wall_time=self._previous_wall_time,
            wall_delta_ms=self._wall_delta_ms,
            now=self._now,
            previous_now=self._previous_now,
            elapsed=self._elapsed,
            desired_update_rate=self.desired_update_rate,
            physics_elapsed_seconds=self.physics_elapsed_seconds,
            physics_elapsed_ms=self.physics_elapsed_ms,
            update_rate_multiplier=self.update_rate_multiplier,
            slow_motion=self.slow_motion,
            pause_duration_ms=self._pause_duration_ms,
            next_call_delay_ms=self._next_call_delay_ms,
            expected_next_call_at=self._expected_next_call_at,
            advanced_timing=self.advanced_timing,
            timing=self._statistics.snapshot(),
        )

    def _update_fallback_cadence(self, now: float) -> None:
        frame_ms = 1000.0 / self.desired_update_rate
        self._next_call_delay_ms = float(
            math.floor(max(0.0, frame_ms - (self._expected_next_call_at - now)))
        )
        self._expected_next_call_at = now + self._next_call_delay_ms

    def _current_wall_time(self) -> float:
        return self._wall_time

    def _create_runtime_timer(self, auto_destroy: bool) -> TimerHandle:
        return create_timer(self._current_wall_time, auto_destroy=auto_destroy)
