"""
Reminder Manager Core

Time source, date helpers and command dispatch shared by the store and the
command handlers.
"""

from .clock import (
    Clock,
    SystemClock,
    FixedClock
)
from .date_utils import (
    DateParseError,
    up_to_day,
    parse_date,
    format_date,
    DEFAULT_DATE_FORMAT
)
from .commander import (
    Commander,
    CommandError,
    UNKNOWN_COMMAND_RESPONSE
)

__all__ = [
    # Clock
    'Clock',
    'SystemClock',
    'FixedClock',
    # Date utilities
    'DateParseError',
    'up_to_day',
    'parse_date',
    'format_date',
    'DEFAULT_DATE_FORMAT',
    # Commander
    'Commander',
    'CommandError',
    'UNKNOWN_COMMAND_RESPONSE',
]
