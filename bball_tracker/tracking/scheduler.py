"""Schedulers - Cancellable delayed callbacks for the undo countdown."""

import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class TimerHandle:
    """Handle for a scheduled callback. Cancelling is idempotent."""

    def __init__(self, deadline: float, callback: Callable[[], None]):
        self.deadline = deadline
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        state = "active" if self.active else ("fired" if self.fired else "cancelled")
        return f"TimerHandle(deadline={self.deadline:.3f}, {state})"


class Scheduler(ABC):
    """Abstract interface for scheduling delayed callbacks."""

    @abstractmethod
    def schedule(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Run callback after delay seconds unless the handle is cancelled."""
        pass

    @abstractmethod
    def now(self) -> float:
        """Current time on the scheduler's clock, in seconds."""
        pass

    def remaining(self, handle: Optional[TimerHandle]) -> float:
        """Seconds until handle fires (0 if it is not active)."""
        if handle is None or not handle.active:
            return 0.0
        return max(0.0, handle.deadline - self.now())


class PollingScheduler(Scheduler):
    """
    Scheduler whose callbacks run when the owner polls it.

    Callbacks always execute on the thread calling run_due(), so a session
    driven by this scheduler is never mutated from a timer thread.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._pending: List[TimerHandle] = []

    def now(self) -> float:
        return self._clock()

    def schedule(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle(self.now() + delay, callback)
        self._pending.append(handle)
        return handle

    @property
    def pending(self) -> List[TimerHandle]:
        """Handles that are neither cancelled nor fired."""
        self._pending = [h for h in self._pending if h.active]
        return list(self._pending)

    def run_due(self) -> int:
        """
        Fire every active callback whose deadline has passed.

        Returns:
            Number of callbacks fired
        """
        now = self.now()
        due = sorted(
            (h for h in self._pending if h.active and h.deadline <= now),
            key=lambda h: h.deadline,
        )
        fired = 0
        for handle in due:
            # an earlier callback may have cancelled this one
            if not handle.active:
                continue
            handle.fired = True
            handle.callback()
            fired += 1
        self._pending = [h for h in self._pending if h.active]
        if fired:
            logger.debug("Fired %d scheduled callback(s)", fired)
        return fired


class ManualScheduler(PollingScheduler):
    """Scheduler with a fake clock for tests."""

    def __init__(self, start: float = 0.0):
        self._time = start
        super().__init__(clock=lambda: self._time)

    def advance(self, seconds: float) -> int:
        """Move the clock forward and fire whatever became due."""
        self._time += seconds
        return self.run_due()
