"""
Parsers for raw API payloads.

The backend speaks camelCase JSON wrapped in `{success, data}` envelopes.
These functions turn those payloads into strict records. Envelope problems
raise; a single bad project inside a good envelope is skipped and logged so
it cannot hide the rest of the list.
"""

import math
from typing import Any, Optional

import structlog

from ..errors import DataSourceError, MalformedDataError, MissingDataError
from .models import CalendarEntry, ClientRef, NamedSeries, ProjectRecord, SeriesKind

logger = structlog.get_logger(__name__)

SERIES_VALUE_KEYS = {
    SeriesKind.INCOME: "incomeValues",
    SeriesKind.EXPENSE: "expenseValues",
    SeriesKind.PROJECT_COUNT: "projectCounts",
}


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _as_amount(payload: dict[str, Any], *keys: str, default: Optional[float] = 0.0) -> Optional[float]:
    """Read the first present key as a float."""
    for key in keys:
        if key not in payload or payload[key] is None:
            continue
        value = payload[key]
        if isinstance(value, bool):
            raise MalformedDataError(f"{key} must be numeric", raw_data=str(value), expected_format="number")
        try:
            amount = float(value)
        except (TypeError, ValueError):
            raise MalformedDataError(f"{key} must be numeric", raw_data=str(value), expected_format="number")
        if not math.isfinite(amount):
            raise MalformedDataError(f"{key} must be finite", raw_data=str(value), expected_format="number")
        return amount
    return default


def parse_project_payload(payload: Any) -> ProjectRecord:
    """
    Parse a single project object.

    Expected format (fields other than id are optional):
    {
        "id": 12, "code": "PRJ001", "name": "Wedding shoot", "status": "ACTIVE",
        "shootStartDate": "2024-02-15T10:00:00Z", "shootEndDate": null,
        "amount": 60000, "pendingAmt": 20000, "receivedAmt": 40000,
        "outsourcing": false, "client": {"name": "Asha", "company": "Asha Events"}
    }

    Raises:
        MissingDataError: If the payload has no id
        MalformedDataError: If the payload is not an object or a field has the wrong type
    """
    if not isinstance(payload, dict):
        raise MalformedDataError(
            "Project payload must be an object",
            raw_data=repr(payload)[:200],
            expected_format="object",
        )

    if payload.get("id") is None:
        raise MissingDataError("Project payload has no id", data_type="project.id")

    client = None
    raw_client = payload.get("client")
    if isinstance(raw_client, dict):
        client = ClientRef(name=_as_text(raw_client.get("name")), company=_as_text(raw_client.get("company")))
    elif raw_client is not None:
        raise MalformedDataError("client must be an object", raw_data=repr(raw_client)[:200], expected_format="object")

    outsourcing = payload.get("outsourcing", False)
    if not isinstance(outsourcing, bool):
        raise MalformedDataError("outsourcing must be a boolean", raw_data=str(outsourcing), expected_format="boolean")

    return ProjectRecord(
        id=str(payload["id"]),
        code=_as_text(payload.get("code")) or "",
        name=_as_text(payload.get("name")) or "",
        status=_as_text(payload.get("status")),
        shoot_start_date=payload.get("shootStartDate"),
        shoot_end_date=payload.get("shootEndDate"),
        amount=_as_amount(payload, "amount"),
        pending_amount=_as_amount(payload, "pendingAmt", "pendingAmount", default=None),
        received_amount=_as_amount(payload, "receivedAmt", "receivedAmount", default=None),
        outsourcing=outsourcing,
        client=client,
        location=_as_text(payload.get("location")),
        project_type=_as_text(payload.get("type")),
    )


def _unwrap_envelope(response: Any, operation: str) -> Any:
    if response is None:
        raise DataSourceError("No response from source", operation=operation)

    if not isinstance(response, dict):
        raise MalformedDataError(
            "Response must be an object",
            raw_data=repr(response)[:200],
            expected_format="{success, data}",
        )

    if not response.get("success"):
        raise DataSourceError(
            f"Source reported failure: {response.get('error') or response.get('message') or 'unknown error'}",
            operation=operation,
        )

    return response.get("data")


def parse_projects_response(response: Any) -> list[ProjectRecord]:
    """
    Parse a project list response.

    Accepts both `{success, data: [...]}` and `{success, data: {projects: [...]}}`.

    Raises:
        DataSourceError: If the response is missing or reports failure
        MalformedDataError: If the envelope has an unexpected shape
    """
    data = _unwrap_envelope(response, "fetch_projects")

    if isinstance(data, list):
        raw_projects = data
    elif isinstance(data, dict) and isinstance(data.get("projects"), list):
        raw_projects = data["projects"]
    else:
        raise MalformedDataError(
            "Unexpected project data format",
            raw_data=repr(data)[:200],
            expected_format="list or {projects: list}",
        )

    projects = []
    for index, raw in enumerate(raw_projects):
        try:
            projects.append(parse_project_payload(raw))
        except (MalformedDataError, MissingDataError) as e:
            logger.warning("Skipping malformed project", index=index, error=str(e))

    return projects


def parse_calendar_entries_response(response: Any) -> list[CalendarEntry]:
    """
    Parse a standalone calendar entry response (`{success, data: [...]}`).

    Entries without id or title are dropped, as the calendar cannot show them.

    Raises:
        DataSourceError: If the response is missing or reports failure
        MalformedDataError: If data is not a list
    """
    data = _unwrap_envelope(response, "fetch_calendar_entries")

    if not isinstance(data, list):
        raise MalformedDataError("Calendar data must be a list", raw_data=repr(data)[:200], expected_format="list")

    entries = []
    for index, raw in enumerate(data):
        if not isinstance(raw, dict) or raw.get("id") is None or not raw.get("title"):
            logger.warning("Skipping malformed calendar entry", index=index)
            continue
        entries.append(CalendarEntry(
            id=str(raw["id"]),
            title=str(raw["title"]),
            start_time=raw.get("startTime"),
            end_time=raw.get("endTime"),
        ))

    return entries


def _series_value(value: Any) -> Optional[float]:
    """Numbers pass through; anything else is a missing data point."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return value


def _parse_period(raw: Any) -> tuple[int, int]:
    if isinstance(raw, str):
        year_text, _, month_text = raw.partition("-")
        raw = (year_text, month_text)
    try:
        year, month = int(raw[0]), int(raw[1])
    except (TypeError, ValueError, IndexError):
        raise MalformedDataError("Invalid period", raw_data=repr(raw), expected_format="[year, month] or 'YYYY-MM'")
    if not 1 <= month <= 12:
        raise MalformedDataError("Period month out of range", raw_data=repr(raw), expected_format="month 1-12")
    return year, month


def parse_named_series_payload(payload: Any, kind: Optional[SeriesKind] = None) -> NamedSeries:
    """
    Parse a monthly series payload.

    Labels come from `labels` or `months`; values from `values` or, when a kind
    is given, the dashboard key for that kind (e.g. `incomeValues`). An
    optional `periods` list of `[year, month]` pairs or `"YYYY-MM"` strings
    pins each label to a calendar month.

    Raises:
        MalformedDataError: If labels or values are missing or not lists
        InconsistentSeriesError: If labels and values differ in length
    """
    if isinstance(payload, dict) and "success" in payload:
        payload = _unwrap_envelope(payload, "fetch_named_series")

    if not isinstance(payload, dict):
        raise MalformedDataError("Series payload must be an object", raw_data=repr(payload)[:200],
                                 expected_format="{labels, values}")

    labels = payload.get("labels", payload.get("months"))
    values = payload.get("values")
    if values is None and kind is not None:
        values = payload.get(SERIES_VALUE_KEYS[kind])

    if not isinstance(labels, list) or not isinstance(values, list):
        raise MalformedDataError("Series payload needs label and value lists", raw_data=repr(payload)[:200],
                                 expected_format="{labels: list, values: list}")

    periods = payload.get("periods")
    parsed_periods = None
    if periods is not None:
        if not isinstance(periods, list):
            raise MalformedDataError("periods must be a list", raw_data=repr(periods)[:200], expected_format="list")
        parsed_periods = tuple(_parse_period(p) for p in periods)

    return NamedSeries(
        labels=tuple(str(label) for label in labels),
        values=tuple(_series_value(v) for v in values),
        periods=parsed_periods,
    )
