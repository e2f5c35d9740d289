"""In-memory sources serving fixed payloads, for tests and local tooling."""

from typing import Any, Optional

from ..data.models import SeriesKind
from .base import CalendarSource, ProjectSource, SeriesSource


class InMemoryProjectSource(ProjectSource):
    """Serves the same project payloads for every month."""

    name = "memory-projects"

    def __init__(self, projects: Optional[list[dict[str, Any]]] = None, success: bool = True):
        self.projects = list(projects or [])
        self.success = success
        self.calls: list[tuple[int, int]] = []

    def fetch_projects_for_month(self, year: int, month: int) -> dict[str, Any]:
        self.calls.append((year, month))
        if not self.success:
            return {"success": False, "error": "source unavailable"}
        return {"success": True, "data": {"projects": list(self.projects)}}


class InMemorySeriesSource(SeriesSource):
    """Serves series payloads by kind; unknown kinds report failure."""

    name = "memory-series"

    def __init__(self, series: Optional[dict[SeriesKind, dict[str, Any]]] = None):
        self.series = dict(series or {})

    def fetch_named_series(self, kind: SeriesKind) -> dict[str, Any]:
        if kind not in self.series:
            return {"success": False, "error": f"no {kind.value} series"}
        return {"success": True, "data": self.series[kind]}


class InMemoryCalendarSource(CalendarSource):
    """Serves the same calendar entries for every month."""

    name = "memory-calendar"

    def __init__(self, entries: Optional[list[dict[str, Any]]] = None):
        self.entries = list(entries or [])

    def fetch_calendar_entries(self, year: int, month: int) -> dict[str, Any]:
        return {"success": True, "data": list(self.entries)}
