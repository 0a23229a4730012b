"""
Reminder Manager Agents - Command Front End

Handlers that translate text commands into ReminderStore calls.
"""

from .reminder_handlers import (
    ReminderHandlers,
    DESCRIPTIONS,
    BAD_ARGUMENT_RESPONSE,
    SUCCESS_RESPONSE,
)

__all__ = [
    'ReminderHandlers',
    'DESCRIPTIONS',
    'BAD_ARGUMENT_RESPONSE',
    'SUCCESS_RESPONSE',
]
