"""
Data source interfaces.

The engine receives its sources through the constructor; nothing in the
core reaches for a global API client.
"""

from .base import CalendarSource, ProjectSource, SeriesSource
from .memory import InMemoryCalendarSource, InMemoryProjectSource, InMemorySeriesSource

__all__ = [
    "CalendarSource",
    "ProjectSource",
    "SeriesSource",
    "InMemoryCalendarSource",
    "InMemoryProjectSource",
    "InMemorySeriesSource",
]
