"""
Main dashboard engine coordinator.

Wires the injected data sources to the aggregation components. Every public
call performs one fetch followed by one synchronous transform; fetch
failures degrade to empty input and are reported through `source_ok`.
"""

from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import structlog

from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .data.models import (
    AggregationResult,
    CalendarEntry,
    ChartPayload,
    NamedSeries,
    ProjectRecord,
    RollingWindowSeries,
    SeriesKind,
)
from .data.parsers import (
    parse_calendar_entries_response,
    parse_named_series_payload,
    parse_projects_response,
)
from .data.validators import DateValidator
from .errors import DataQualityError, SystemFailureError
from .events.aggregator import EventAggregator
from .filters.projects import FilterKey, ProjectFilterResolver
from .series.charts import ChartSeriesTransformer
from .series.rolling import RollingWindowAligner
from .sources.base import CalendarSource, ProjectSource, SeriesSource
from .status.classifier import StatusClassifier

logger = structlog.get_logger(__name__)


class DashboardEngine:
    """
    Main coordinator for calendar and dashboard aggregation.

    Manages the pipeline:
    Source → Parse → Classify/Validate → Aggregate/Align → Chart payload
    """

    def __init__(
        self,
        project_source: ProjectSource,
        series_source: Optional[SeriesSource] = None,
        calendar_source: Optional[CalendarSource] = None,
        config: Optional[DefaultConfig] = None,
        config_dir: Optional[Union[str, Path]] = None,
    ) -> None:
        """Initialize the engine with its sources and configuration."""
        self.logger = logger
        self.project_source = project_source
        self.series_source = series_source
        self.calendar_source = calendar_source

        if config is None:
            config = ConfigLoader.create(Path(config_dir) if config_dir else None).load_config()
        self.config = config

        validator = DateValidator()
        classifier = StatusClassifier(config.status)
        self.aggregator = EventAggregator(config.calendar, classifier=classifier, validator=validator)
        self.aligner = RollingWindowAligner(config.window)
        self.charts = ChartSeriesTransformer(config.chart)
        self.filters = ProjectFilterResolver(config.filters, classifier=classifier, validator=validator)

        self.logger.info("Dashboard engine initialized", window_size=config.window.size)

    def load_projects(self, year: int, month: int) -> tuple[list[ProjectRecord], bool]:
        """
        Fetch and parse the projects for a month.

        Returns:
            (projects, source_ok); projects is empty when the fetch failed
        """
        try:
            response = self.project_source.fetch_projects_for_month(year, month)
            return parse_projects_response(response), True
        except (DataQualityError, SystemFailureError) as e:
            self.logger.error("Project fetch failed", year=year, month=month, error=str(e))
        except Exception as e:
            self.logger.error("Project source raised", year=year, month=month,
                              error=str(e), error_type=type(e).__name__)
        return [], False

    def load_calendar_entries(self, year: int, month: int) -> tuple[list[CalendarEntry], bool]:
        """Fetch standalone calendar entries; no source means no entries."""
        if self.calendar_source is None:
            return [], True

        try:
            response = self.calendar_source.fetch_calendar_entries(year, month)
            return parse_calendar_entries_response(response), True
        except (DataQualityError, SystemFailureError) as e:
            self.logger.error("Calendar fetch failed", year=year, month=month, error=str(e))
        except Exception as e:
            self.logger.error("Calendar source raised", year=year, month=month,
                              error=str(e), error_type=type(e).__name__)
        return [], False

    def load_series(self, kind: SeriesKind) -> tuple[NamedSeries, bool]:
        """
        Fetch and parse one monthly series.

        Returns:
            (series, source_ok); the series is empty when the fetch failed
        """
        if self.series_source is None:
            self.logger.warning("No series source configured", kind=kind.value)
            return NamedSeries.empty(), False

        try:
            payload = self.series_source.fetch_named_series(kind)
            return parse_named_series_payload(payload, kind), True
        except (DataQualityError, SystemFailureError) as e:
            self.logger.error("Series fetch failed", kind=kind.value, error=str(e))
        except Exception as e:
            self.logger.error("Series source raised", kind=kind.value,
                              error=str(e), error_type=type(e).__name__)
        return NamedSeries.empty(), False

    def events_for_month(self, year: int, month: int) -> AggregationResult:
        """Build the calendar day map for a month."""
        projects, projects_ok = self.load_projects(year, month)
        entries, entries_ok = self.load_calendar_entries(year, month)

        result = self.aggregator.aggregate_month(projects, year, month, entries)
        result.source_ok = projects_ok and entries_ok

        self.logger.info(
            "Calendar month aggregated",
            year=year,
            month=month,
            days=len(result.events),
            events=result.event_count,
            skipped=len(result.warnings),
            source_ok=result.source_ok,
        )
        return result

    def rolling_series(self, kind: SeriesKind, window_size: Optional[int] = None,
                       now: Optional[datetime] = None) -> RollingWindowSeries:
        """Fetch a monthly series and align it onto the trailing window."""
        series, source_ok = self.load_series(kind)
        window = self.aligner.align(series, window_size=window_size, now=now)
        return replace(window, source_ok=source_ok)

    def monthly_chart(self, kind: SeriesKind, chart_type: str = "bar",
                      now: Optional[datetime] = None) -> ChartPayload:
        """Chart payload for one monthly series over the trailing window."""
        window = self.rolling_series(kind, now=now)
        color = {
            SeriesKind.INCOME: self.config.chart.income_color,
            SeriesKind.EXPENSE: self.config.chart.expense_color,
            SeriesKind.PROJECT_COUNT: self.config.chart.projects_color,
        }[kind]
        if chart_type == "line":
            return self.charts.line_series(window, color=color)
        return self.charts.bar_series(window, color=color)

    def income_expense_charts(self, now: Optional[datetime] = None) -> dict[str, Any]:
        """Income, expense and net bar charts over the same window."""
        income = self.rolling_series(SeriesKind.INCOME, now=now)
        expense = self.rolling_series(SeriesKind.EXPENSE, now=now)
        return {
            "income": self.charts.bar_series(income, color=self.config.chart.income_color),
            "expense": self.charts.bar_series(expense, color=self.config.chart.expense_color),
            "net": self.charts.net_series(income, expense),
            "source_ok": income.source_ok and expense.source_ok,
        }

    def filter_projects(self, year: int, month: int, query: Optional[str] = None,
                        status_filters: Iterable[Union[FilterKey, str]] = ()) -> list[ProjectRecord]:
        """Fetch a month's projects and apply the list filters."""
        projects, _ = self.load_projects(year, month)
        return self.filters.filter(projects, query, status_filters)

    def upcoming_shoots(self, year: int, month: int, now: Optional[datetime] = None,
                        limit: Optional[int] = None) -> list[ProjectRecord]:
        """Fetch a month's projects and return the next shoots after `now`."""
        projects, _ = self.load_projects(year, month)
        return self.filters.upcoming_shoots(projects, now=now, limit=limit)
