"""
Reminder Memory - Ordered Reminder Store

Reminders kept sorted by date, in process memory only.
"""

from .reminder_models import (
    Reminder,
    ReminderStoreError,
    ReminderNotFoundError,
    InvalidArgumentError,
)
from .reminder_store import ReminderStore

__all__ = [
    'Reminder',
    'ReminderStoreError',
    'ReminderNotFoundError',
    'InvalidArgumentError',
    'ReminderStore',
]
