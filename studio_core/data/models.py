"""
Canonical data models for studio records and aggregation outputs.

Input records are immutable views of what the API layer returned. Output
structures are built fresh on every aggregation pass and never mutated
after they are handed to the presentation layer.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from ..errors import InconsistentSeriesError
from ..utils.time import to_day_key


class StatusClass(str, Enum):
    """Normalized project status buckets."""
    ACTIVE = "active"
    PENDING = "pending"
    COMPLETED = "completed"
    UNKNOWN = "unknown"


class EventType(str, Enum):
    """Calendar event kinds."""
    PROJECT_START = "project-start"
    PROJECT_END = "project-end"
    CALENDAR = "calendar"


class SeriesKind(str, Enum):
    """Monthly series available from the dashboard backend."""
    INCOME = "income"
    EXPENSE = "expense"
    PROJECT_COUNT = "project_count"


@dataclass(frozen=True)
class ClientRef:
    """Client summary embedded in a project record."""
    name: Optional[str] = None
    company: Optional[str] = None


@dataclass(frozen=True)
class ProjectRecord:
    """A project as delivered by the API layer. Dates stay raw until validated."""
    id: str
    code: str = ""
    name: str = ""
    status: Optional[str] = None
    shoot_start_date: Optional[str] = None      # ISO-8601, possibly malformed
    shoot_end_date: Optional[str] = None        # ISO-8601, possibly malformed
    amount: float = 0.0
    pending_amount: Optional[float] = None
    received_amount: Optional[float] = None
    outsourcing: bool = False
    client: Optional[ClientRef] = None
    location: Optional[str] = None
    project_type: Optional[str] = None


@dataclass(frozen=True)
class CalendarEntry:
    """A standalone calendar appointment not tied to a project."""
    id: str
    title: str
    start_time: Optional[str] = None
    end_time: Optional[str] = None


@dataclass(frozen=True)
class ParsedDate:
    """Outcome of parsing a date-like value."""

    raw: Any = None
    value: Optional[datetime] = None    # UTC-aware when valid
    valid: bool = False
    present: bool = False
    reason: Optional[str] = None

    @property
    def day(self) -> Optional[date]:
        """Calendar day of the parsed instant, None unless valid."""
        return self.value.date() if self.valid and self.value is not None else None

    @property
    def day_key(self) -> Optional[str]:
        """ISO day key (YYYY-MM-DD), None unless valid."""
        day = self.day
        return to_day_key(day) if day is not None else None

    @classmethod
    def ok(cls, raw: Any, value: datetime):
        """Create a valid result."""
        return cls(raw=raw, value=value, valid=True, present=True)

    @classmethod
    def invalid(cls, raw: Any, reason: str):
        """Create a result for a present but unparseable value."""
        return cls(raw=raw, valid=False, present=True, reason=reason)

    @classmethod
    def absent(cls, raw: Any = None):
        """Create a result for a missing value."""
        return cls(raw=raw, valid=False, present=False, reason="absent")


@dataclass(frozen=True)
class CalendarEvent:
    """One marker on the calendar. Created once per record field."""
    date: str                           # YYYY-MM-DD
    type: EventType
    title: str
    color: str
    is_completed: bool = False
    description: str = ""
    project_code: Optional[str] = None
    project_id: Optional[str] = None
    amount: float = 0.0
    location: str = ""
    status_class: Optional[StatusClass] = None

    def to_payload(self) -> dict[str, Any]:
        """Render the event in the shape the calendar screen consumes."""
        payload: dict[str, Any] = {
            "type": self.type.value,
            "title": self.title,
            "color": self.color,
            "isCompleted": self.is_completed,
            "description": self.description,
        }
        if self.project_id is not None:
            payload["projectId"] = self.project_id
            payload["projectCode"] = self.project_code
            payload["amount"] = self.amount
            payload["location"] = self.location
            payload["status"] = self.status_class.value if self.status_class else None
        return payload


DayEventsMap = dict[str, list[CalendarEvent]]


@dataclass(frozen=True)
class AggregationWarning:
    """A single event that was dropped during aggregation."""
    field: str
    raw_value: Any
    reason: str
    project_id: Optional[str] = None
    project_code: Optional[str] = None


@dataclass
class AggregationResult:
    """Day-indexed events plus everything that was skipped on the way."""

    events: DayEventsMap = field(default_factory=dict)
    warnings: list[AggregationWarning] = field(default_factory=list)
    source_ok: bool = True

    def events_on(self, day_key: str) -> list[CalendarEvent]:
        """Events for a day; an absent key means no events."""
        return list(self.events.get(day_key, []))

    @property
    def event_count(self) -> int:
        """Total number of events across all days."""
        return sum(len(day_events) for day_events in self.events.values())

    @property
    def is_empty(self) -> bool:
        """True when no day has events."""
        return not self.events

    def to_payload(self) -> dict[str, list[dict[str, Any]]]:
        """Render the map keyed by ISO day."""
        return {
            day_key: [event.to_payload() for event in day_events]
            for day_key, day_events in self.events.items()
        }

    @classmethod
    def empty(cls, source_ok: bool = True, warnings: Optional[list[AggregationWarning]] = None):
        """Create a result with no events."""
        return cls(events={}, warnings=list(warnings or []), source_ok=source_ok)


@dataclass(frozen=True)
class NamedSeries:
    """Monthly series keyed by long month name, optionally with explicit periods."""

    labels: tuple[str, ...] = ()
    values: tuple[Optional[float], ...] = ()
    periods: Optional[tuple[tuple[int, int], ...]] = None    # (year, month) per label

    def __post_init__(self):
        """Freeze sequences, coerce labels to text and enforce the label/value pairing."""
        object.__setattr__(self, "labels", tuple("" if label is None else str(label) for label in self.labels))
        object.__setattr__(self, "values", tuple(self.values))
        if self.periods is not None:
            object.__setattr__(self, "periods", tuple(tuple(p) for p in self.periods))

        if len(self.labels) != len(self.values):
            raise InconsistentSeriesError(
                f"Series has {len(self.labels)} labels but {len(self.values)} values",
                label_count=len(self.labels),
                value_count=len(self.values),
            )

        if self.periods is not None and len(self.periods) != len(self.labels):
            raise InconsistentSeriesError(
                f"Series has {len(self.labels)} labels but {len(self.periods)} periods",
                label_count=len(self.labels),
                value_count=len(self.values),
            )

    def __len__(self) -> int:
        return len(self.labels)

    @classmethod
    def empty(cls):
        """Create a series with no data points."""
        return cls(labels=(), values=())


@dataclass(frozen=True)
class RollingWindowSeries:
    """Fixed-length chronological window, oldest month first."""
    labels: tuple[str, ...]
    values: tuple[float, ...]
    months: tuple[tuple[int, int], ...] = ()
    warnings: tuple[str, ...] = ()
    source_ok: bool = True

    def __len__(self) -> int:
        return len(self.labels)

    @property
    def is_all_zero(self) -> bool:
        """True when no month in the window has data."""
        return all(value == 0 for value in self.values)

    def to_payload(self) -> dict[str, list]:
        """Render as {labels, values}."""
        return {"labels": list(self.labels), "values": list(self.values)}


@dataclass(frozen=True)
class ChartPayload:
    """Chart-ready labels and values for one widget."""
    chart_type: str                                 # "bar", "line" or "pie"
    labels: tuple[str, ...]
    values: tuple[float, ...]
    colors: tuple[str, ...] = ()
    percentages: Optional[tuple[int, ...]] = None   # pie only
    legend_labels: Optional[tuple[str, ...]] = None # pie only, truncated
    is_empty: bool = False

    def to_payload(self) -> dict[str, Any]:
        """Render as {labels, values, percentages?}."""
        payload: dict[str, Any] = {
            "type": self.chart_type,
            "labels": list(self.labels),
            "values": list(self.values),
            "colors": list(self.colors),
            "isEmpty": self.is_empty,
        }
        if self.percentages is not None:
            payload["percentages"] = list(self.percentages)
        if self.legend_labels is not None:
            payload["legendLabels"] = list(self.legend_labels)
        return payload
