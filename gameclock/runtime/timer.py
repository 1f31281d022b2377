"""Wall-clock driven event timer used as master and pooled timer."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from heapq import heapify, heappop, heappush

from gameclock.api.timers import TimerCallback

_LOG = logging.getLogger("gameclock.timers")


@dataclass(slots=True)
class _TimerEvent:
    event_id: int
    delay_ms: float
    due_ms: float
    callback: TimerCallback
    remaining: int | None = 1
    cancelled: bool = False


class RuntimeTimer:
    """Dispatches one-shot, repeating and looping events against wall time.

    Event delays are relative to the moment they are added, or to the start
    time for events added before `start`. Time spent paused is excluded: on
    resume every pending event is pushed back by the paused span. Each event
    is dispatched at most once per `advance`, so a loop that fell several
    intervals behind catches up one dispatch per frame.
    """

    def __init__(
        self,
        *,
        time_source: Callable[[], float],
        auto_destroy: bool = True,
    ) -> None:
        self._time_source = time_source
        self._auto_destroy = auto_destroy
        self._running = False
        self._paused = False
        self._expired = False
        self._destroyed = False
        self._started_at = 0.0
        self._now_ms = 0.0
        self._pause_started_at = 0.0
        self._paused_total_ms = 0.0
        self._next_event_id = 1
        self._events: dict[int, _TimerEvent] = {}
        self._queue: list[tuple[float, int]] = []

    @property
    def running(self) -> bool:
        return self._running

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def expired(self) -> bool:
        return self._expired

    @property
    def auto_destroy(self) -> bool:
        return self._auto_destroy

    @property
    def length(self) -> int:
        """Return count of pending events."""
        return sum(1 for event in self._events.values() if not event.cancelled)

    @property
    def next_tick(self) -> float | None:
        """Return wall time of the earliest pending event, if any."""
        for due_ms, event_id in sorted(self._queue):
            event = self._events.get(event_id)
            if event is not None and not event.cancelled:
                return due_ms
        return None

    @property
    def ms(self) -> float:
        """Return running milliseconds since start, excluding pauses."""
        if not self._running:
            return 0.0
        reference = self._pause_started_at if self._paused else self._now_ms
        return max(0.0, reference - self._started_at - self._paused_total_ms)

    @property
    def seconds(self) -> float:
        return self.ms * 0.001

    def add(self, delay_ms: float, callback: TimerCallback) -> int:
        """Schedule a one-shot event after delay."""
        if delay_ms < 0.0:
            raise ValueError("delay_ms must be >= 0")
        return self._schedule(delay_ms=delay_ms, callback=callback, remaining=1)

    def repeat(self, delay_ms: float, count: int, callback: TimerCallback) -> int:
        """Schedule an event dispatched `count` times, `delay_ms` apart."""
        if delay_ms < 0.0:
            raise ValueError("delay_ms must be >= 0")
        if count <= 0:
            raise ValueError("count must be > 0")
        return self._schedule(delay_ms=delay_ms, callback=callback, remaining=count)

    def loop(self, delay_ms: float, callback: TimerCallback) -> int:
        """Schedule an event dispatched every `delay_ms` until removed."""
        if delay_ms <= 0.0:
            raise ValueError("delay_ms must be > 0")
        return self._schedule(delay_ms=delay_ms, callback=callback, remaining=None)

    def remove(self, event_id: int) -> bool:
        """Cancel a pending event; return whether it was pending."""
        event = self._events.get(event_id)
        if event is None or event.cancelled:
            return False
        event.cancelled = True
        return True

    def remove_all(self) -> None:
        """Drop every pending event."""
        self._events.clear()
        self._queue.clear()

    def start(self, delay_ms: float = 0.0) -> None:
        """Start the timer, re-basing events added while it was stopped."""
        if self._running:
            return
        self._started_at = self._time_source() + delay_ms
        self._now_ms = self._started_at
        self._paused_total_ms = 0.0
        self._running = True
        for event in self._events.values():
            event.due_ms = self._started_at + event.delay_ms
        self._rebuild_queue()

    def stop(self, clear_events: bool = True) -> None:
        self._running = False
        self._paused = False
        if clear_events:
            self.remove_all()

    def pause(self) -> None:
        if not self._running or self._paused:
            return
        self._paused = True
        self._pause_started_at = self._time_source()

    def resume(self) -> None:
        if not self._paused:
            return
        paused_span = max(0.0, self._time_source() - self._pause_started_at)
        self._paused = False
        self._paused_total_ms += paused_span
        for event in self._events.values():
            event.due_ms += paused_span
        self._rebuild_queue()

    def destroy(self) -> None:
        """Stop and release all events; the next `advance` returns False."""
        self._running = False
        self._paused = False
        self._expired = True
        self._destroyed = True
        self.remove_all()

    def advance(self, wall_time: float) -> bool:
        """Dispatch events due at `wall_time`; False means prune this timer."""
        if self._destroyed:
            return False
        if not self._running or self._paused:
            return True
        self._now_ms = wall_time
        dispatched = self._run_due(wall_time)
        if self._destroyed:
            return False
        if dispatched == 0 or self.length > 0:
            return True
        self._expired = True
        if not self._auto_destroy:
            return True
        _LOG.debug("timer_expired dispatched=%d", dispatched)
        self.destroy()
        return False

    def _run_due(self, wall_time: float) -> int:
        dispatched = 0
        rescheduled: list[_TimerEvent] = []
        while self._queue and self._queue[0][0] <= wall_time:
            _, event_id = heappop(self._queue)
            event = self._events.get(event_id)
            if event is None or event.cancelled:
                self._events.pop(event_id, None)
                continue
            event.callback()
            dispatched += 1
            if self._destroyed:
                break
            if event.cancelled:
                self._events.pop(event_id, None)
                continue
            if event.remaining is not None:
                event.remaining -= 1
                if event.remaining <= 0:
                    self._events.pop(event_id, None)
                    continue
            event.due_ms += event.delay_ms
            rescheduled.append(event)
        for event in rescheduled:
            entry = (event.due_ms, event.event_id)
            if self._destroyed or self._events.get(event.event_id) is not event:
                continue
            if entry not in self._queue:
                heappush(self._queue, entry)
        return dispatched

    def _schedule(
        self,
        *,
        delay_ms: float,
        callback: TimerCallback,
        remaining: int | None,
    ) -> int:
        event_id = self._next_event_id
        self._next_event_id += 1
        if self._paused:
            base = self._pause_started_at
        else:
            base = self._time_source()
        event = _TimerEvent(
            event_id=event_id,
            delay_ms=delay_ms,
            due_ms=base + delay_ms,
            callback=callback,
            remaining=remaining,
        )
        self._events[event_id] = event
        heappush(self._queue, (event.due_ms, event_id))
        self._expired = False
        return event_id

    def _rebuild_queue(self) -> None:
        self._queue = [
            (event.due_ms, event.event_id)
            for event in self._events.values()
            if not event.cancelled
        ]
        heapify(self._queue)
