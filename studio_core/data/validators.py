"""
Date validation for backend records.

Backend timestamps are ISO-8601 strings that are sometimes malformed. The
validator never raises: every input maps to a ParsedDate that callers
branch on, so one bad field cannot take down a whole aggregation pass.
"""

from datetime import date, datetime, time, timezone
from typing import Any

from .models import ParsedDate


class DateValidator:
    """Parses date-like values into UTC datetimes with a validity flag."""

    def parse(self, value: Any) -> ParsedDate:
        """
        Parse a date-like value.

        Args:
            value: ISO-8601 string, date, datetime or None

        Returns:
            ParsedDate; `present` is False for None or blank strings,
            `valid` is True only for a real calendar date
        """
        if value is None:
            return ParsedDate.absent()

        if isinstance(value, datetime):
            try:
                return ParsedDate.ok(value, self._to_utc(value))
            except OverflowError as e:
                return ParsedDate.invalid(value, f"out of range: {e}")

        if isinstance(value, date):
            return ParsedDate.ok(value, datetime.combine(value, time.min, tzinfo=timezone.utc))

        if not isinstance(value, str):
            return ParsedDate.invalid(value, f"unsupported type {type(value).__name__}")

        text = value.strip()
        if not text:
            return ParsedDate.absent(value)

        if text[-1] in ("Z", "z"):
            text = text[:-1] + "+00:00"

        try:
            parsed = datetime.fromisoformat(text)
            return ParsedDate.ok(value, self._to_utc(parsed))
        except (ValueError, OverflowError) as e:
            return ParsedDate.invalid(value, f"not an ISO-8601 date: {e}")

    def is_valid(self, value: Any) -> bool:
        """True if the value parses to a real calendar date."""
        return self.parse(value).valid

    @staticmethod
    def _to_utc(value: datetime) -> datetime:
        """Treat naive values as UTC; convert aware values to UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


_default_validator = DateValidator()


def parse_date(value: Any) -> ParsedDate:
    """Parse a date-like value with the shared validator."""
    return _default_validator.parse(value)


def is_valid_date(value: Any) -> bool:
    """True if the value parses to a real calendar date."""
    return _default_validator.is_valid(value)
