"""
Debounce

Coalesces bursts of calls into one delayed call after a quiet period.
"""

from __future__ import annotations
from typing import Any, Callable, Optional

from .host import TimerHandle

Schedule = Callable[[float, Callable[[], Any]], TimerHandle]


class Debouncer:
    """Run ``callback`` once, ``delay`` seconds after the last call.

    Every call cancels the pending timer and starts a new one with the latest
    arguments. ``on_burst_start`` runs immediately on the first call of a
    burst, i.e. when no timer is pending.
    """

    def __init__(
        self,
        callback: Callable[..., Any],
        delay: float,
        schedule: Schedule,
        on_burst_start: Optional[Callable[..., Any]] = None,
    ):
        """Initialize debouncer.

        Args:
            callback: Called with the arguments of the last call of a burst
            delay: Quiet period in seconds
            schedule: Timer factory, ``schedule(delay, fn) -> TimerHandle``
            on_burst_start: Called with the arguments of the first call of a burst
        """
        self.callback = callback
        self.delay = delay
        self.schedule = schedule
        self.on_burst_start = on_burst_start
        self._timer: Optional[TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def __call__(self, *args, **kwargs):
        if self._timer is not None:
            self._timer.cancel()
        elif self.on_burst_start:
            self.on_burst_start(*args, **kwargs)

        def fire():
            # A superseded timer that fires anyway is ignored
            if self._timer is not timer:
                return
            self._timer = None
            self.callback(*args, **kwargs)

        timer = self.schedule(self.delay, fire)
        self._timer = timer

    def cancel(self):
        """Drop the pending call, if any."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
