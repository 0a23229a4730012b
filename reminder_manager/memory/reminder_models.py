"""
Reminder Models

Data structures for the ordered reminder store.

Philosophy:
- One reminder = one due-dated note
- Day precision only (time-of-day is truncated away)
- Only the text can change after creation
- No recurrence, no status tracking
"""

from dataclasses import FrozenInstanceError, dataclass
from datetime import datetime
from typing import Optional

from reminder_manager.core.date_utils import format_date


class ReminderStoreError(Exception):
    """Base exception for reminder store errors"""
    pass


class ReminderNotFoundError(ReminderStoreError, KeyError):
    """Raised when no reminder carries the requested id"""

    def __init__(self, reminder_id: int):
        self.reminder_id = reminder_id
        super().__init__(f"No reminder with id {reminder_id}")

    def __str__(self) -> str:
        # KeyError quotes its argument otherwise
        return f"No reminder with id {self.reminder_id}"


class InvalidArgumentError(ReminderStoreError, ValueError):
    """Raised when an operation receives an argument that would break the store"""
    pass


@dataclass
class Reminder:
    """
    A single reminder held by a ReminderStore.

    id and date are fixed at creation (reassigning them raises
    FrozenInstanceError); text is replaced only through
    ReminderStore.edit_text().
    """
    id: int
    text: str
    date: datetime  # Naive datetime at midnight, system local time

    READ_ONLY_FIELDS = ('id', 'date')

    def __setattr__(self, name, value):
        if name in self.READ_ONLY_FIELDS and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        if name in self.READ_ONLY_FIELDS:
            raise FrozenInstanceError(f"cannot delete field {name!r}")
        super().__delattr__(name)

    def __post_init__(self):
        """Validate reminder data"""
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id < 1:
            raise InvalidArgumentError(f"Reminder id must be a positive integer, got {self.id!r}")
        if not isinstance(self.text, str) or not self.text.strip():
            raise InvalidArgumentError("Reminder text cannot be empty")
        if not isinstance(self.date, datetime):
            raise InvalidArgumentError("date must be datetime")

    def is_outdated(self, today: datetime) -> bool:
        """
        Check if the reminder is outdated.

        Logic: date < today (strictly before the current day)

        Args:
            today: Start of the current day

        Returns:
            True if the reminder's day has already passed
        """
        return self.date < today

    def format(self, date_format: Optional[str] = None) -> str:
        """Render as a single line: '#<id> <date> <text>'"""
        return f"#{self.id} {format_date(self.date, date_format)} {self.text}"

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict"""
        return {
            'id': self.id,
            'text': self.text,
            'date': self.date.isoformat(),
        }

    def __str__(self) -> str:
        return self.format()
