"""
Reminder Store - Ordered In-Memory Storage

Keeps reminders sorted by date and answers chronological queries.

Design:
- One list, always sorted ascending by date
- Binary search for insertion, window bounds and the outdated prefix
- Linear search by id for edit/remove (ids are not ordered by date)
- One RLock serializes every public operation
- Callers only ever see copies of stored reminders
- Equal dates: a new reminder goes BEFORE existing reminders of that day
"""

import bisect
import copy
import itertools
import logging
import threading
from datetime import datetime, timedelta
from typing import List, Optional

from reminder_manager.core.clock import Clock, SystemClock
from .reminder_models import (
    InvalidArgumentError,
    Reminder,
    ReminderNotFoundError,
)

logger = logging.getLogger(__name__)


def _by_date(reminder: Reminder) -> datetime:
    return reminder.date


class ReminderStore:
    """
    Sorted reminder collection with windowed queries.

    Invariants:
    - self._reminders is sorted by date at every point between operations
    - ids are unique and never reused by this instance

    Thread-safety:
    - Every public method holds self._lock for its whole duration
    """

    def __init__(self, clock: Optional[Clock] = None):
        """
        Initialize reminder store.

        Args:
            clock: Time source for "today" (default: SystemClock)
        """
        self.clock = clock or SystemClock()
        self._lock = threading.RLock()
        self._reminders: List[Reminder] = []
        self._ids = itertools.count(1)

        logger.info(f"ReminderStore initialized (clock={type(self.clock).__name__})")

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, text: str, date: datetime) -> int:
        """
        Add a new reminder.

        Args:
            text: What to remember (stored stripped)
            date: Due day; time-of-day is truncated

        Returns:
            Id of the new reminder

        Raises:
            InvalidArgumentError: If text is empty or date is not a datetime
        """
        text = self._validate_text(text)
        if not isinstance(date, datetime):
            raise InvalidArgumentError("date must be datetime")
        # Strip timezone info so every stored date compares with a naive "today"
        if date.tzinfo:
            date = date.replace(tzinfo=None)

        with self._lock:
            reminder = Reminder(
                id=next(self._ids),
                text=text,
                date=self.clock.start_of_day(date),
            )
            index = bisect.bisect_left(self._reminders, reminder.date, key=_by_date)
            self._reminders.insert(index, reminder)

        logger.info(f"Added reminder: {reminder.id} - {reminder.text} (date: {reminder.date.date()})")
        return reminder.id

    def remove_outdated(self) -> int:
        """
        Remove every reminder dated before today.

        Returns:
            Number of removed reminders (0 if nothing was outdated)
        """
        with self._lock:
            outdated = self._outdated_count(self.clock.today())
            if outdated:
                del self._reminders[:outdated]

        if outdated:
            logger.info(f"Removed {outdated} outdated reminders")
        return outdated

    def remove_by_id(self, reminder_id: int) -> None:
        """
        Delete a reminder permanently.

        Raises:
            ReminderNotFoundError: If no reminder has this id
        """
        with self._lock:
            index = self._index_by_id(reminder_id)
            removed = self._reminders.pop(index)

        logger.info(f"Deleted reminder: {removed.id}")

    def edit_text(self, reminder_id: int, new_text: str) -> None:
        """
        Replace the text of a reminder. Date and id are untouched.

        Raises:
            InvalidArgumentError: If new_text is empty
            ReminderNotFoundError: If no reminder has this id
        """
        new_text = self._validate_text(new_text)

        with self._lock:
            index = self._index_by_id(reminder_id)
            self._reminders[index].text = new_text

        logger.info(f"Updated reminder: {reminder_id}")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def query_window(self, days_ahead: int) -> List[Reminder]:
        """
        Get reminders due in [today, today + days_ahead days).

        Args:
            days_ahead: Window length in days, 1 means today only

        Returns:
            Copies of matching reminders in ascending date order (may be empty)

        Raises:
            InvalidArgumentError: If days_ahead is not an int >= 1
        """
        if isinstance(days_ahead, bool) or not isinstance(days_ahead, int) or days_ahead < 1:
            raise InvalidArgumentError(f"days_ahead must be a positive integer, got {days_ahead!r}")

        with self._lock:
            today = self.clock.today()
            lo = bisect.bisect_left(self._reminders, today, key=_by_date)
            try:
                border = today + timedelta(days=days_ahead)
            except OverflowError:
                # Window reaches past datetime.max: everything from today on
                hi = len(self._reminders)
            else:
                hi = bisect.bisect_left(self._reminders, border, lo=lo, key=_by_date)
            window = [copy.copy(r) for r in self._reminders[lo:hi]]

        logger.debug(f"Found {len(window)} reminders for next {days_ahead} days")
        return window

    def today(self) -> List[Reminder]:
        """Reminders due today"""
        return self.query_window(1)

    def count_outdated(self) -> int:
        """Number of reminders dated before today"""
        with self._lock:
            return self._outdated_count(self.clock.today())

    def snapshot(self) -> List[Reminder]:
        """
        Get all reminders in chronological order.

        Returns:
            Copies of every stored reminder; changing them does not affect the store
        """
        with self._lock:
            return [copy.copy(r) for r in self._reminders]

    def get(self, reminder_id: int) -> Optional[Reminder]:
        """
        Get a specific reminder by id.

        Returns:
            Copy of the reminder if found, None otherwise
        """
        with self._lock:
            for reminder in self._reminders:
                if reminder.id == reminder_id:
                    return copy.copy(reminder)
        return None

    def get_stats(self) -> dict:
        """
        Get storage statistics.

        Returns:
            Dict with total, outdated and upcoming counts
        """
        with self._lock:
            total = len(self._reminders)
            outdated = self._outdated_count(self.clock.today())

        return {
            'total': total,
            'outdated': outdated,
            'upcoming': total - outdated,
        }

    def __len__(self) -> int:
        with self._lock:
            return len(self._reminders)

    # ------------------------------------------------------------------
    # Internals (caller holds self._lock)
    # ------------------------------------------------------------------

    def _outdated_count(self, today: datetime) -> int:
        # Outdated reminders form a prefix because the list is sorted
        return bisect.bisect_left(self._reminders, today, key=_by_date)

    def _index_by_id(self, reminder_id: int) -> int:
        for i, reminder in enumerate(self._reminders):
            if reminder.id == reminder_id:
                return i

        logger.warning(f"Reminder {reminder_id} not found")
        raise ReminderNotFoundError(reminder_id)

    @staticmethod
    def _validate_text(text: str) -> str:
        if not isinstance(text, str) or not text.strip():
            raise InvalidArgumentError("Reminder text cannot be empty")
        return text.strip()
