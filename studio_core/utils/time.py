"""
Calendar month utilities.

Month names are fixed English names rather than locale output, so series
labels produced by the backend match regardless of the host locale.
"""

from datetime import date, datetime, timezone
from typing import Optional

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def get_current_time(now: Optional[datetime] = None) -> datetime:
    """
    Get the reference time for windowing.

    Args:
        now: Explicit reference time, returned unchanged when provided

    Returns:
        The given time, or the current UTC wall-clock time
    """
    if now is not None:
        return now

    return datetime.now(timezone.utc)


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """
    Move a (year, month) pair by a number of months.

    Args:
        year: Calendar year
        month: Month number, 1-12
        delta: Months to move; negative goes back in time

    Returns:
        The shifted (year, month) pair
    """
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def trailing_months(now: datetime, count: int) -> list[tuple[int, int]]:
    """
    List the `count` calendar months ending at `now`'s month, oldest first.

    Args:
        now: Reference time; its month is the last entry
        count: Number of months to return

    Returns:
        List of (year, month) pairs
    """
    return [shift_month(now.year, now.month, -offset) for offset in range(count - 1, -1, -1)]


def month_name(month: int) -> str:
    """Long English name for a month number (1 -> 'January')."""
    return MONTH_NAMES[month - 1]


def month_abbreviation(month: int, length: int = 3) -> str:
    """Abbreviated English name for a month number (1 -> 'Jan')."""
    return MONTH_NAMES[month - 1][:length]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """
    First and last calendar day of a month.

    Raises:
        ValueError: If the year or month is out of range
    """
    first = date(year, month, 1)
    next_year, next_month = shift_month(year, month, 1)
    last = date.fromordinal(date(next_year, next_month, 1).toordinal() - 1)
    return first, last


def to_day_key(value: date) -> str:
    """Format a date as the ISO day key used by calendar maps."""
    return value.isoformat()
