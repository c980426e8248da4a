"""Sources of the current instant."""

from abc import ABC, abstractmethod
from datetime import datetime

from django.utils import timezone


class Clock(ABC):
    """Interface for reading the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current timezone-aware instant."""
        ...


class SystemClock(Clock):
    """Wall clock, read through Django's timezone utilities."""

    def now(self) -> datetime:
        return timezone.now()


class FixedClock(Clock):
    """Clock frozen at a given instant."""

    def __init__(self, instant: datetime) -> None:
        if timezone.is_naive(instant):
            raise ValueError("FixedClock requires a timezone-aware instant")
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        if timezone.is_naive(instant):
            raise ValueError("FixedClock requires a timezone-aware instant")
        self._instant = instant
