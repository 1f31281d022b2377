"""Rolling frame-rate statistics for advanced timing."""

from __future__ import annotations

import logging
import math

from gameclock.api.clock import TimingSnapshot

_LOG = logging.getLogger("gameclock.stats")

_FPS_MIN_SEED = 1000
_FPS_MAX_SEED = 0
_MS_MIN_SEED = 1000.0
_MS_MAX_SEED = 0.0


class TimingStatistics:
    """Per-second rates, extrema and a coarse sustainable-rate estimate.

    `sample` is fed once per frame; `count_update` and `count_render` once per
    logic update and render. Nothing here checks the enabled flag, the clock
    gates every call.
    """

    def __init__(self, *, suggested_rate: float) -> None:
        self.frames = 0
        self.updates = 0
        self.renders = 0
        self.fps = 0
        self.ups = 0
        self.rps = 0
        self.fps_min = _FPS_MIN_SEED
        self.fps_max = _FPS_MAX_SEED
        self.ms_min = _MS_MIN_SEED
        self.ms_max = _MS_MAX_SEED
        self.suggested_rate = int(suggested_rate)
        self._frame_count = 0
        self._elapsed_accumulator = 0.0
        self._time_last_second = 0.0

    def sample(self, *, now: float, elapsed: float, desired_update_rate: float) -> None:
        """Fold one frame into the rolling statistics."""
        self._frame_count += 1
        self._elapsed_accumulator += elapsed

        if self._frame_count >= desired_update_rate * 2:
            self._recompute_suggested_rate()

        self.ms_min = min(self.ms_min, elapsed)
        self.ms_max = max(self.ms_max, elapsed)

        self.frames += 1

        if now > self._time_last_second + 1000.0:
            self._roll_over_second(now)

    def count_update(self) -> None:
        self.updates += 1

    def count_render(self) -> None:
        self.renders += 1

    def reset_extrema(self) -> None:
        """Forget observed fps and frame-duration extrema."""
        self.fps_min = _FPS_MIN_SEED
        self.fps_max = _FPS_MAX_SEED
        self.ms_min = _MS_MIN_SEED
        self.ms_max = _MS_MAX_SEED

    def snapshot(self) -> TimingSnapshot:
        return TimingSnapshot(
            frames=self.frames,
            updates=self.updates,
            renders=self.renders,
            fps=self.fps,
            ups=self.ups,
            rps=self.rps,
            fps_min=self.fps_min,
            fps_max=self.fps_max,
            ms_min=self.ms_min,
            ms_max=self.ms_max,
            suggested_rate=self.suggested_rate,
        )

    def _recompute_suggested_rate(self) -> None:
        average_ms = self._elapsed_accumulator / self._frame_count
        # Multiples of 5: 200 / avg_ms == (1000 / avg_ms) / 5.
        if average_ms > 0.0:
            self.suggested_rate = math.floor(200.0 / average_ms) * 5
        _LOG.debug(
            "suggested_rate_recomputed rate=%d frames=%d average_ms=%.3f",
            self.suggested_rate,
            self._frame_count,
            average_ms,
        )
        self._frame_count = 0
        self._elapsed_accumulator = 0.0

    def _roll_over_second(self, now: float) -> None:
        interval = now - self._time_last_second
        self.fps = _round_half_up(self.frames * 1000.0 / interval)
        self.ups = _round_half_up(self.updates * 1000.0 / interval)
        self.rps = _round_half_up(self.renders * 1000.0 / interval)
        self.fps_min = min(self.fps_min, self.fps)
        self.fps_max = max(self.fps_max, self.fps)
        self._time_last_second = now
        self.frames = 0
        self.updates = 0
        self.renders = 0
        if _LOG.isEnabledFor(logging.DEBUG):
            _LOG.debug("timing_second fps=%d ups=%d rps=%d", self.fps, self.ups, self.rps)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
