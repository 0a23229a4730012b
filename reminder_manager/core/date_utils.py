"""
Date helpers for the command layer.

Pure functions: no clock reads happen here unless a clock is passed in.
"""

from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from reminder_manager.core.clock import Clock

DEFAULT_DATE_FORMAT = "%d.%m.%y"

TODAY_KEYWORD = "today"
TOMORROW_KEYWORD = "tomorrow"


class DateParseError(ValueError):
    """Raised when a date token cannot be understood"""
    pass


def up_to_day(moment: Union[datetime, date]) -> datetime:
    """
    Truncate to midnight of the same calendar day.

    Plain date objects are promoted to a datetime at midnight.
    tzinfo is kept as-is.
    """
    if isinstance(moment, datetime):
        return moment.replace(hour=0, minute=0, second=0, microsecond=0)
    if isinstance(moment, date):
        return datetime(moment.year, moment.month, moment.day)
    raise TypeError(f"Expected datetime or date, got {type(moment).__name__}")


def parse_date(token: str, clock: "Clock", date_format: Optional[str] = None) -> datetime:
    """
    Parse a user-supplied date token.

    Accepts 'today', 'tomorrow' (case-insensitive) or a date in date_format
    (default dd.mm.yy).

    Raises:
        DateParseError: If the token matches none of these
    """
    if not token or not token.strip():
        raise DateParseError("Empty date")

    normalized = token.strip().lower()
    if normalized == TODAY_KEYWORD:
        return clock.today()
    if normalized == TOMORROW_KEYWORD:
        return clock.today() + timedelta(days=1)

    fmt = date_format or DEFAULT_DATE_FORMAT
    try:
        parsed = datetime.strptime(token.strip(), fmt)
    except ValueError as e:
        raise DateParseError(f"Cannot parse date {token!r} with format {fmt!r}") from e

    return up_to_day(parsed)


def format_date(moment: datetime, date_format: Optional[str] = None) -> str:
    """Render a date the same way parse_date() reads it"""
    return moment.strftime(date_format or DEFAULT_DATE_FORMAT)
