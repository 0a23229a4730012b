"""
Clock - Injectable Source of "Now"

Responsibilities:
- Provide the current moment
- Normalize a moment to the start of its calendar day
- Let tests pin or advance time without waiting on the wall clock
"""

import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timedelta

from reminder_manager.core.date_utils import up_to_day

logger = logging.getLogger(__name__)


class Clock(ABC):
    """
    Base class for time sources used by ReminderStore.

    Subclasses implement now(); day normalization is shared.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current moment (naive, local time)"""
        pass

    def start_of_day(self, moment: datetime) -> datetime:
        """Truncate a moment to midnight of the same calendar day"""
        return up_to_day(moment)

    def today(self) -> datetime:
        """Start of the current day"""
        return self.start_of_day(self.now())


class SystemClock(Clock):
    """Wall clock used in production wiring"""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(Clock):
    """
    Manually driven clock for tests and simulations.

    Time only moves when set() or advance() is called.
    """

    def __init__(self, moment: datetime):
        """
        Initialize fixed clock.

        Args:
            moment: Initial reading
        """
        if not isinstance(moment, datetime):
            raise TypeError("moment must be datetime")
        self._lock = threading.Lock()
        self._moment = moment

    def now(self) -> datetime:
        with self._lock:
            return self._moment

    def set(self, moment: datetime) -> None:
        """Jump to an arbitrary moment (forwards or backwards)"""
        if not isinstance(moment, datetime):
            raise TypeError("moment must be datetime")
        with self._lock:
            self._moment = moment
        logger.debug(f"FixedClock set to {moment}")

    def advance(self, days: int = 0, hours: int = 0, minutes: int = 0, seconds: int = 0) -> datetime:
        """
        Move the clock forward.

        Returns:
            The new reading

        Raises:
            ValueError: If the total delta is not positive
        """
        delta = timedelta(days=days, hours=hours, minutes=minutes, seconds=seconds)
        if delta <= timedelta(0):
            raise ValueError("advance() requires a positive delta")

        with self._lock:
            self._moment = self._moment + delta
            moment = self._moment

        logger.debug(f"FixedClock advanced by {delta} to {moment}")
        return moment
