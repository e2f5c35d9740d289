"""Base classes for the data sources the engine pulls records from."""

from abc import ABC, abstractmethod
from typing import Any

from ..data.models import SeriesKind


class ProjectSource(ABC):
    """Supplies the raw project list for a calendar month."""

    name: str = "projects"

    @abstractmethod
    def fetch_projects_for_month(self, year: int, month: int) -> dict[str, Any]:
        """
        Fetch projects for a month.

        Args:
            year: Calendar year
            month: Month number, 1-12

        Returns:
            Raw response envelope: {"success": bool, "data": {"projects": [...]}}
        """
        pass


class SeriesSource(ABC):
    """Supplies monthly dashboard series."""

    name: str = "series"

    @abstractmethod
    def fetch_named_series(self, kind: SeriesKind) -> dict[str, Any]:
        """
        Fetch one monthly series.

        Returns:
            Raw payload {"labels": [...], "values": [...]}, optionally wrapped
            in a {"success", "data"} envelope
        """
        pass


class CalendarSource(ABC):
    """Supplies standalone calendar entries for a month."""

    name: str = "calendar"

    @abstractmethod
    def fetch_calendar_entries(self, year: int, month: int) -> dict[str, Any]:
        """
        Fetch calendar entries for a month.

        Returns:
            Raw response envelope: {"success": bool, "data": [...]}
        """
        pass
