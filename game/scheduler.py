"""
Cooperative timers - single-threaded, driven by advance(dt)

Replaces per-entity dt accumulators with named one-shot and recurring timers
so that a timer can be re-armed (enemy cadence) or cancelled (stale respawn)
when a level is rebuilt.
"""

import heapq
import logging
from itertools import count

logger = logging.getLogger(__name__)


class Timer:
    """Handle returned by the scheduler"""
    def __init__(self, due, callback, interval=None, name=None):
        self.due = due
        self.callback = callback
        self.interval = interval
        self.name = name or getattr(callback, '__name__', 'timer')
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    @property
    def repeating(self):
        return self.interval is not None

    def __repr__(self):
        kind = f"every {self.interval}ms" if self.repeating else "once"
        return f"Timer({self.name}, due={self.due}, {kind}, cancelled={self.cancelled})"


class Scheduler:
    """
    Virtual clock in milliseconds

    Callbacks run one at a time, in due-time order (FIFO for equal due
    times). A callback may schedule or cancel timers, including itself.
    """
    def __init__(self):
        self.now = 0
        self._queue = []
        self._seq = count()

    def _push(self, timer):
        heapq.heappush(self._queue, (timer.due, next(self._seq), timer))
        return timer

    def call_later(self, delay, callback, name=None):
        """Run callback once after delay ms"""
        return self._push(Timer(self.now + max(0, delay), callback, name=name))

    def call_every(self, interval, callback, name=None):
        """Run callback every interval ms (first run after one interval)"""
        if interval <= 0:
            raise ValueError("interval must be positive")
        return self._push(Timer(self.now + interval, callback, interval=interval, name=name))

    def cancel(self, timer):
        if timer is not None:
            timer.cancel()

    def cancel_all(self):
        live = 0
        for _, _, timer in self._queue:
            if not timer.cancelled:
                live += 1
            timer.cancel()
        self._queue.clear()
        logger.debug("Cancelled %d pending timers at t=%s", live, self.now)

    def pending(self):
        """Live timers, soonest first"""
        return [t for _, _, t in sorted(self._queue, key=lambda e: e[:2]) if not t.cancelled]

    def advance(self, dt):
        """
        Move the clock forward and fire everything that became due

        Args:
            dt: Elapsed milliseconds

        Returns:
            Number of callbacks fired
        """
        target = self.now + dt
        fired = 0

        while self._queue and self._queue[0][0] <= target:
            due, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue

            self.now = due
            if timer.repeating:
                timer.due = due + timer.interval
                self._push(timer)

            timer.callback()
            fired += 1

        self.now = target
        return fired

    def __repr__(self):
        return f"Scheduler(now={self.now}, pending={len(self.pending())})"
