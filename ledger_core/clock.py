"""
Clock Module

Time source used to stamp transactions. The ledger only depends on the
abstract contract so tests can substitute a deterministic clock.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Optional


class Clock(ABC):
    """Abstract time source"""

    @abstractmethod
    def now(self) -> datetime:
        """Current instant"""
        pass


class SystemClock(Clock):
    """Wall clock in UTC"""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class ManualClock(Clock):
    """
    Deterministic clock for tests

    Returns the same instant until moved, or advances by ``step`` after
    every call when a step is given.
    """

    def __init__(self, start: Optional[datetime] = None, step: Optional[timedelta] = None):
        self._current = start or datetime(2024, 1, 1, tzinfo=timezone.utc)
        self._step = step

    def now(self) -> datetime:
        current = self._current
        if self._step:
            self._current = current + self._step
        return current

    def advance(self, delta: timedelta) -> datetime:
        """Move the clock forward and return the new instant"""
        self._current = self._current + delta
        return self._current

    def set(self, instant: datetime) -> None:
        self._current = instant
