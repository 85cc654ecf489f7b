from __future__ import annotations

"""Elapsed-time accounting in whole seconds.

A front-end calls :meth:`ElapsedClock.tick` from its periodic callback, at any
rate. Only whole seconds are added; the sub-second remainder stays behind the
anchor and is picked up by later ticks.
"""

import time
from typing import Callable

ClockFn = Callable[[], float]


class ElapsedClock:
    def __init__(self, clock: ClockFn | None = None) -> None:
        self._clock = clock or time.monotonic
        self._anchor = 0.0
        self._running = False
        self.seconds = 0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Reset to zero and begin counting from now."""
        self.seconds = 0
        self._anchor = self._clock()
        self._running = True

    def tick(self) -> int:
        """Add whole seconds elapsed since the anchor; return the total."""
        if not self._running:
            return self.seconds
        now = self._clock()
        whole = int(now - self._anchor)
        if whole >= 1:
            self.seconds += whole
            self._anchor += whole
        return self.seconds

    def stop(self) -> int:
        """Catch up once more, then freeze."""
        self.tick()
        self._running = False
        return self.seconds
