"""Cancellable one-shot timers driven by polling.

The game re-arms its timer after every tick with a delay that depends on the
score, so a fixed-period interval is not enough. :class:`PollingScheduler`
keeps one-shot :class:`TimerHandle` objects and fires the ones that are due
whenever the host loop calls :meth:`PollingScheduler.run_due` (a Streamlit
fragment, a pygame-style frame loop, or a test advancing a fake clock).
"""

import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol

from grid_snake.types import TimerCallback

Clock = Callable[[], float]


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


@dataclass(eq=False)
class TimerHandle:
    """A pending callback. ``cancelled`` handles are never fired."""

    due_ms: float
    callback: TimerCallback
    cancelled: bool = False
    fired: bool = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        self.cancelled = True


class Scheduler(Protocol):
    def schedule(self, delay_ms: float, callback: TimerCallback) -> TimerHandle: ...

    def cancel(self, handle: Optional[TimerHandle]) -> None: ...

    def run_due(self, now_ms: Optional[float] = None) -> int: ...


class PollingScheduler:
    clock: Clock

    def __init__(self, clock: Clock = monotonic_ms):
        self.clock = clock
        self._pending: List[TimerHandle] = []
        self._firing: Optional[TimerHandle] = None

    @property
    def pending(self) -> List[TimerHandle]:
        return [h for h in self._pending if h.active]

    def schedule(self, delay_ms: float, callback: TimerCallback) -> TimerHandle:
        """Arm a one-shot timer.

        Inside a callback the delay counts from the due time of the handle being
        fired, so polling latency does not stretch a re-arming chain.
        """
        start = self._firing.due_ms if self._firing is not None else self.clock()
        handle = TimerHandle(due_ms=start + max(0.0, delay_ms), callback=callback)
        self._pending.append(handle)
        return handle

    def cancel(self, handle: Optional[TimerHandle]) -> None:
        if handle is None:
            return
        handle.cancel()
        self._pending = [h for h in self._pending if h is not handle]

    def next_due_ms(self) -> Optional[float]:
        due = [h.due_ms for h in self._pending if h.active]
        return min(due) if due else None

    def run_due(self, now_ms: Optional[float] = None) -> int:
        """Fire every active handle due at ``now_ms`` (default: the clock).

        Handles are fired in due order. Callbacks scheduled while running wait
        for a later call, even when already due.

        Returns:
            int: Number of callbacks fired.
        """
        now = self.clock() if now_ms is None else now_ms
        due = sorted(
            (h for h in self._pending if h.active and h.due_ms <= now),
            key=lambda h: h.due_ms,
        )
        self._pending = [h for h in self._pending if h not in due and h.active]
        fired = 0
        for handle in due:
            # An earlier callback may have cancelled this one.
            if not handle.active:
                continue
            handle.fired = True
            self._firing = handle
            try:
                handle.callback()
            finally:
                self._firing = None
            fired += 1
        return fired
