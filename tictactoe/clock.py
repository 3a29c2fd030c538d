"""
Clocks and timers for TicTacToe Arena.

The match controller never reads the system time or starts timers on
its own: it is handed a clock (now_ms) and a scheduler
(schedule_after / cancel). The Tk front-end schedules with root.after,
the console runner and the tests use the EventLoop below.
"""

import sched
import time
from typing import Any, Callable, Optional


class MonotonicClock:
    """Real time, in milliseconds."""

    def now_ms(self) -> float:
        return time.monotonic() * 1000.0

    def sleep_ms(self, ms: float):
        if ms > 0:
            time.sleep(ms / 1000.0)


class ManualClock:
    """
    A clock that only moves when told to.
    Used for tests and for replaying games deterministically.
    """

    def __init__(self, start_ms: float = 0.0):
        self._now = start_ms

    def now_ms(self) -> float:
        return self._now

    def sleep_ms(self, ms: float):
        if ms > 0:
            self._now += ms

    def advance(self, ms: float):
        self.sleep_ms(ms)


class EventLoop:
    """
    Single-threaded timer queue built on the standard library scheduler.

    Callbacks run one at a time, in due order, on the thread that calls
    run_pending() / run_for().
    """

    def __init__(self, clock=None):
        self.clock = clock if clock is not None else MonotonicClock()
        self._scheduler = sched.scheduler(self.clock.now_ms, self.clock.sleep_ms)

    def schedule_after(self, delay_ms: float, callback: Callable[[], Any]) -> sched.Event:
        """Run callback once, delay_ms from now. Returns a handle for cancel()."""
        return self._scheduler.enter(delay_ms, 1, callback)

    def cancel(self, handle: Optional[sched.Event]):
        """Cancel a pending callback. Handles that already fired are ignored."""
        if handle is not None and handle in self._scheduler.queue:
            self._scheduler.cancel(handle)

    def run_pending(self):
        """Run every callback that is due now, without waiting."""
        self._scheduler.run(blocking=False)

    def run_for(self, duration_ms: float):
        """
        Let duration_ms pass, running callbacks as they come due.

        With a ManualClock this is instantaneous; with a real clock it sleeps.
        """
        deadline = self.clock.now_ms() + duration_ms
        while True:
            queue = self._scheduler.queue
            if not queue or queue[0].time > deadline:
                break
            self.clock.sleep_ms(queue[0].time - self.clock.now_ms())
            self._scheduler.run(blocking=False)
        self.clock.sleep_ms(deadline - self.clock.now_ms())

    @property
    def pending(self) -> int:
        """Number of callbacks waiting to run."""
        return len(self._scheduler.queue)
