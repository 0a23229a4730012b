"""
Reminder Manager - Dated Personal Reminders

In-memory store of reminders kept in date order, with a slash-command front end.
"""

__version__ = "0.1.0"
