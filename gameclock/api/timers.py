"""Public timer API contracts."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

TimerCallback = Callable[[], None]


@runtime_checkable
class TimerHandle(Protocol):
    """Capability set the clock's timer pool relies on."""

    def advance(self, wall_time: float) -> bool:
        """Dispatch due work and return False when the timer should be pruned."""

    def pause(self) -> None:
        """Suspend the timer while the host is paused."""

    def resume(self) -> None:
        """Continue the timer after a host pause."""

    def destroy(self) -> None:
        """Release all pending work."""


@runtime_checkable
class MasterTimer(TimerHandle, Protocol):
    """Privileged timer bound to the clock for its whole lifetime."""

    def start(self, delay_ms: float = 0.0) -> None:
        """Begin dispatching events."""

    def remove_all(self) -> None:
        """Drop pending events without stopping the timer."""


TimerFactory = Callable[[bool], TimerHandle]


def create_timer(
    time_source: Callable[[], float],
    *,
    auto_destroy: bool = True,
) -> MasterTimer:
    """Create default wall-clock driven timer implementation."""
    from gameclock.runtime.timer import RuntimeTimer

    return RuntimeTimer(time_source=time_source, auto_destroy=auto_destroy)
