"""
Calendar event aggregation.

Turns the project list for a month into a day-indexed map of start/end
markers. Every record field is handled independently: a malformed start
date drops only the start marker of that project, never the end marker
and never the rest of the month.
"""

from collections.abc import Iterable
from typing import Optional

from structlog.types import FilteringBoundLogger

from ..config.defaults import CalendarParams
from ..data.models import (
    AggregationResult,
    AggregationWarning,
    CalendarEntry,
    CalendarEvent,
    DayEventsMap,
    EventType,
    ParsedDate,
    ProjectRecord,
    StatusClass,
)
from ..data.validators import DateValidator
from ..logging.config import get_aggregation_logger, log_skipped_event
from ..status.classifier import StatusClassifier
from ..utils.time import month_bounds

aggregation_logger = get_aggregation_logger(__name__)


class EventAggregator:
    """Builds DayEventsMaps from project records and calendar entries."""

    def __init__(
        self,
        params: Optional[CalendarParams] = None,
        classifier: Optional[StatusClassifier] = None,
        validator: Optional[DateValidator] = None,
        logger: Optional[FilteringBoundLogger] = None,
    ):
        self.params = params or CalendarParams()
        self.classifier = classifier or StatusClassifier()
        self.validator = validator or DateValidator()
        self.logger = logger or aggregation_logger

    def aggregate(
        self,
        projects: Iterable[Optional[ProjectRecord]],
        calendar_entries: Iterable[CalendarEntry] = (),
    ) -> AggregationResult:
        """
        Aggregate records into calendar events keyed by ISO day.

        Calendar entries are placed first, then project markers in input
        order. Within one day, events keep the order they were produced in.

        Args:
            projects: Project records; None entries are skipped
            calendar_entries: Standalone calendar appointments

        Returns:
            AggregationResult with the day map and one warning per skipped event
        """
        events: DayEventsMap = {}
        warnings: list[AggregationWarning] = []

        for entry in calendar_entries:
            self._add_calendar_entry(entry, events, warnings)

        for project in projects:
            if not isinstance(project, ProjectRecord):
                self._skip(warnings, None, None, "project", project, "not a project record")
                continue
            self._add_project(project, events, warnings)

        return AggregationResult(events=events, warnings=warnings)

    def aggregate_month(
        self,
        projects: Iterable[Optional[ProjectRecord]],
        year: int,
        month: int,
        calendar_entries: Iterable[CalendarEntry] = (),
    ) -> AggregationResult:
        """
        Aggregate only the records that touch a calendar month.

        A project is included when its start or end date falls inside the
        month; both of its markers are then emitted, even one that falls in
        an adjacent month.

        Args:
            projects: Project records for (at least) the month
            year: Calendar year
            month: Month number, 1-12
            calendar_entries: Standalone calendar appointments

        Returns:
            AggregationResult; empty with a warning if year/month is invalid
        """
        warnings: list[AggregationWarning] = []
        try:
            if isinstance(year, bool) or isinstance(month, bool):
                raise ValueError("year and month must be integers")
            first, last = month_bounds(int(year), int(month))
        except (TypeError, ValueError) as e:
            self._skip(warnings, None, None, "month", f"{year}-{month}", f"invalid month: {e}")
            return AggregationResult.empty(warnings=warnings)

        def in_month(parsed: ParsedDate) -> bool:
            return parsed.valid and first <= parsed.day <= last

        included: list[ProjectRecord] = []
        for project in projects:
            if not isinstance(project, ProjectRecord):
                self._skip(warnings, None, None, "project", project, "not a project record")
                continue

            start = self.validator.parse(project.shoot_start_date)
            end = self.validator.parse(project.shoot_end_date)
            if in_month(start) or in_month(end):
                included.append(project)
                continue

            for field_name, parsed in (("shoot_start_date", start), ("shoot_end_date", end)):
                if parsed.present and not parsed.valid:
                    self._skip(warnings, project.id, project.code, field_name, parsed.raw, parsed.reason)

        # Unparseable entries stay in so aggregate() reports them
        month_entries = []
        for entry in calendar_entries:
            parsed = self.validator.parse(entry.start_time)
            if not parsed.valid or in_month(parsed):
                month_entries.append(entry)

        result = self.aggregate(included, month_entries)
        result.warnings[:0] = warnings
        return result

    def _add_calendar_entry(self, entry: CalendarEntry, events: DayEventsMap,
                            warnings: list[AggregationWarning]) -> None:
        parsed = self.validator.parse(entry.start_time)
        if not parsed.valid:
            self._skip(warnings, entry.id, None, "start_time", parsed.raw, parsed.reason)
            return

        events.setdefault(parsed.day_key, []).append(CalendarEvent(
            date=parsed.day_key,
            type=EventType.CALENDAR,
            title=entry.title,
            color=self.params.calendar_entry_color,
            is_completed=False,
            description=entry.title,
        ))

    def _add_project(self, project: ProjectRecord, events: DayEventsMap,
                     warnings: list[AggregationWarning]) -> None:
        status_class = self.classifier.classify_project(project)

        sides = (
            (EventType.PROJECT_START, "shoot_start_date", project.shoot_start_date),
            (EventType.PROJECT_END, "shoot_end_date", project.shoot_end_date),
        )
        for event_type, field_name, raw in sides:
            parsed = self.validator.parse(raw)
            if not parsed.present:
                continue
            if not parsed.valid:
                self._skip(warnings, project.id, project.code, field_name, raw, parsed.reason)
                continue

            event = self._build_project_event(project, parsed, event_type, status_class)
            events.setdefault(event.date, []).append(event)

    def _build_project_event(self, project: ProjectRecord, parsed: ParsedDate,
                             event_type: EventType, status_class: StatusClass) -> CalendarEvent:
        code = project.code or self.params.missing_code
        name = project.name or self.params.untitled_project
        completed = status_class is StatusClass.COMPLETED

        if event_type is EventType.PROJECT_START:
            title = f"{code} Start"
            description = f"{name} - Start Date"
            color = self.params.start_color
        else:
            title = f"{code} End"
            description = f"{name} - End Date"
            color = self.params.end_color

        if completed:
            color = self.params.completed_color
            description += self.params.completed_suffix

        return CalendarEvent(
            date=parsed.day_key,
            type=event_type,
            title=title,
            color=color,
            is_completed=completed,
            description=description,
            project_code=code,
            project_id=project.id,
            amount=project.amount or 0.0,
            location=project.location or "",
            status_class=status_class,
        )

    def _skip(self, warnings: list[AggregationWarning], project_id: Optional[str],
              project_code: Optional[str], field_name: str, raw_value, reason: Optional[str]) -> None:
        reason = reason or "invalid"
        warnings.append(AggregationWarning(
            field=field_name,
            raw_value=raw_value,
            reason=reason,
            project_id=project_id,
            project_code=project_code,
        ))
        log_skipped_event(self.logger, project_id, field_name, raw_value, reason)


def aggregate_project_events(projects: Iterable[Optional[ProjectRecord]]) -> AggregationResult:
    """Aggregate with default styling and vocabulary."""
    return EventAggregator().aggregate(projects)
