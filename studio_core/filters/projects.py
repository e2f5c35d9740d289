"""
Project list filtering.

Filtering is a pure, order-preserving subset operation: the text query and
the selected filter keys only ever remove projects, never reorder them.
Selected filter keys are OR'd; the text query is AND'd with the result.
"""

from collections.abc import Callable, Iterable
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from ..config.defaults import FilterParams
from ..data.models import ProjectRecord, StatusClass
from ..data.validators import DateValidator
from ..status.classifier import StatusClassifier
from ..utils.time import get_current_time


class FilterKey(str, Enum):
    """Selectable project list filters."""
    ACTIVE = "active"
    PENDING = "pending"
    COMPLETED = "completed"
    HIGH_VALUE = "high_value"
    OUTSOURCED = "outsourced"

    @classmethod
    def parse(cls, key: Union["FilterKey", str]) -> "FilterKey":
        """
        Resolve a filter key from an enum member or its case-insensitive value.

        Raises:
            ValueError: If the key is not a known filter
        """
        if isinstance(key, cls):
            return key
        normalized = str(key).strip().lower().replace(" ", "_").replace("-", "_")
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unknown filter key: {key!r}")


STATUS_FILTERS = {
    FilterKey.ACTIVE: StatusClass.ACTIVE,
    FilterKey.PENDING: StatusClass.PENDING,
    FilterKey.COMPLETED: StatusClass.COMPLETED,
}


class ProjectFilterResolver:
    """Applies text search and filter keys to a project list."""

    def __init__(self, params: Optional[FilterParams] = None,
                 classifier: Optional[StatusClassifier] = None,
                 validator: Optional[DateValidator] = None):
        self.params = params or FilterParams()
        self.classifier = classifier or StatusClassifier()
        self.validator = validator or DateValidator()

    def filter(self, projects: Iterable[ProjectRecord], query: Optional[str] = None,
               status_filters: Iterable[Union[FilterKey, str]] = ()) -> list[ProjectRecord]:
        """
        Filter projects by text query and filter keys.

        Args:
            projects: Projects in display order
            query: Case-insensitive substring matched against name, code,
                status and client name/company
            status_filters: Filter keys; a project passes if any key matches

        Returns:
            Matching projects in their original order

        Raises:
            ValueError: If a filter key string is not recognized
        """
        keys = {FilterKey.parse(key) for key in status_filters}
        needle = (query or "").strip().lower()
        predicates = [self.predicate_for(key) for key in sorted(keys, key=lambda k: k.value)]

        result = []
        for project in projects:
            if needle and not self.matches_query(project, needle):
                continue
            if predicates and not any(predicate(project) for predicate in predicates):
                continue
            result.append(project)
        return result

    def predicate_for(self, key: FilterKey) -> Callable[[ProjectRecord], bool]:
        """Build the predicate behind one filter key."""
        if key in STATUS_FILTERS:
            status_class = STATUS_FILTERS[key]
            return lambda project: self.classifier.classify_project(project) is status_class
        if key is FilterKey.HIGH_VALUE:
            threshold = self.params.high_value_threshold
            return lambda project: (project.amount or 0) >= threshold
        return lambda project: project.outsourcing is True

    @staticmethod
    def matches_query(project: ProjectRecord, needle: str) -> bool:
        """True if any searchable field contains the (lower-cased) needle."""
        fields = [project.name, project.code, project.status]
        if project.client is not None:
            fields.extend([project.client.name, project.client.company])
        return any(needle in value.lower() for value in fields if value)

    def upcoming_shoots(self, projects: Iterable[ProjectRecord], now: Optional[datetime] = None,
                        limit: Optional[int] = None) -> list[ProjectRecord]:
        """
        Projects whose shoot starts after `now`, soonest first.

        Projects without a valid start date are left out.

        Raises:
            ValueError: If limit is negative
        """
        now = get_current_time(now)
        if now.tzinfo is None:
            now = self.validator.parse(now).value
        limit = self.params.upcoming_limit if limit is None else limit
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise ValueError(f"limit must be a non-negative integer, got {limit!r}")

        dated = []
        for position, project in enumerate(projects):
            parsed = self.validator.parse(project.shoot_start_date)
            if parsed.valid and parsed.value > now:
                dated.append((parsed.value, position, project))

        dated.sort(key=lambda item: (item[0], item[1]))
        return [project for _, _, project in dated[:limit]]

    def count_by_status(self, projects: Iterable[ProjectRecord]) -> dict[StatusClass, int]:
        """Number of projects in each status class, for status tabs."""
        counts = {status_class: 0 for status_class in StatusClass}
        for project in projects:
            counts[self.classifier.classify_project(project)] += 1
        return counts
