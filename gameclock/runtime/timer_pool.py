"""Pool of independently advanced timers owned by the game clock."""

from __future__ import annotations

import logging

from gameclock.api.timers import TimerHandle

_LOG = logging.getLogger("gameclock.timers")


class TimerPool:
    """Unordered timer collection advanced once per unpaused frame."""

    def __init__(self) -> None:
        self._timers: list[TimerHandle] = []

    def __len__(self) -> int:
        return len(self._timers)

    def __bool__(self) -> bool:
        return bool(self._timers)

    @property
    def timers(self) -> tuple[TimerHandle, ...]:
        return tuple(self._timers)

    def add(self, timer: TimerHandle) -> TimerHandle:
        """Insert a timer and return it unchanged."""
        self._timers.append(timer)
        return timer

    def destroy_all(self) -> None:
        """Destroy every pooled timer and empty the pool."""
        timers = self._timers
        self._timers = []
        for timer in timers:
            timer.destroy()

    def pause_all(self) -> None:
        # Reverse order so a timer removing itself does not shift unvisited entries.
        for index in range(len(self._timers) - 1, -1, -1):
            if index < len(self._timers):
                self._timers[index].pause()

    def resume_all(self) -> None:
        for index in range(len(self._timers) - 1, -1, -1):
            if index < len(self._timers):
                self._timers[index].resume()

    def advance(self, wall_time: float) -> int:
        """Advance every timer and prune the ones that ask to stop.

        Returns the number of pruned timers. Survivors keep their order.
        """
        index = 0
        pruned = 0
        while index < len(self._timers):
            timer = self._timers[index]
            if timer.advance(wall_time):
                index += 1
                continue
            # A callback may have cleared or reshaped the pool during advance.
            if index < len(self._timers) and self._timers[index] is timer:
                del self._timers[index]
                pruned += 1
        if pruned and _LOG.isEnabledFor(logging.DEBUG):
            _LOG.debug("timer_pool_pruned pruned=%d remaining=%d", pruned, len(self._timers))
        return pruned
