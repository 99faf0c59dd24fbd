"""Clock sources for reading the current Unix timestamp."""

import time
import threading
from abc import ABC, abstractmethod


class Clock(ABC):
    """Source of whole seconds since the Unix epoch."""

    @abstractmethod
    def now(self) -> int:
        """Returns the current Unix timestamp in whole seconds."""
        pass


class SystemClock(Clock):
    """Wall-clock time, truncated to whole seconds."""

    def now(self) -> int:
        return int(time.time())


class FixedClock(Clock):
    """A clock that only moves when told to.

    Used to simulate elapsed time without sleeping.
    """

    def __init__(self, timestamp: int) -> None:
        self._timestamp = timestamp
        self._lock = threading.Lock()

    def now(self) -> int:
        with self._lock:
            return self._timestamp

    def advance(self, seconds: int) -> int:
        """Moves the clock forward and returns the new timestamp."""
        if seconds < 0:
            raise ValueError(f"Cannot move clock backwards by {seconds} seconds")
        with self._lock:
            self._timestamp += seconds
            return self._timestamp

    def set(self, timestamp: int) -> None:
        """Jumps to an absolute timestamp."""
        with self._lock:
            self._timestamp = timestamp


SYSTEM_CLOCK = SystemClock()
