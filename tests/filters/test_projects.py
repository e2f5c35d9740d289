"""Tests for project list filtering."""

import pytest
from datetime import datetime

from studio_core.config.defaults import FilterParams
from studio_core.data.models import ClientRef, ProjectRecord, StatusClass
from studio_core.filters.projects import FilterKey, ProjectFilterResolver


@pytest.fixture
def projects() -> list:
    """A mixed project list in display order."""
    return [
        ProjectRecord(id="1", code="PRJ001", name="Wedding", status="active", amount=60000.0,
                      shoot_start_date="2024-04-20T10:00:00Z",
                      client=ClientRef(name="Asha", company="Asha Events")),
        ProjectRecord(id="2", code="PRJ002", name="Headshots", status="completed", amount=15000.0,
                      shoot_start_date="2024-04-12T08:00:00Z", outsourcing=True),
        ProjectRecord(id="3", code="PRJ003", name="Product Catalogue", status="pending", amount=80000.0,
                      shoot_start_date="2024-03-01T08:00:00Z"),
        ProjectRecord(id="4", code="PRJ004", name="Birthday", status=None, pending_amount=1000.0,
                      shoot_start_date="bad-date"),
    ]


@pytest.fixture
def resolver() -> ProjectFilterResolver:
    """Resolver with default parameters."""
    return ProjectFilterResolver()


class TestFilterKey:
    """Test filter key parsing."""

    @pytest.mark.parametrize("raw,expected", [
        ("Active", FilterKey.ACTIVE),
        ("high-value", FilterKey.HIGH_VALUE),
        ("High Value", FilterKey.HIGH_VALUE),
        (FilterKey.OUTSOURCED, FilterKey.OUTSOURCED),
    ])
    def test_parse(self, raw, expected):
        """Keys are accepted in display or enum form."""
        assert FilterKey.parse(raw) is expected

    def test_unknown_key(self):
        """Test an unsupported key."""
        with pytest.raises(ValueError, match="Unknown filter key"):
            FilterKey.parse("favourites")


class TestProjectFilterResolver:
    """Test ProjectFilterResolver.filter."""

    def test_no_filters_returns_all(self, resolver, projects):
        """With nothing selected the list is unchanged."""
        assert resolver.filter(projects) == projects

    def test_status_filters_are_a_union(self, resolver, projects):
        """Selecting Active and Completed shows both, not their intersection."""
        result = resolver.filter(projects, status_filters=[FilterKey.ACTIVE, FilterKey.COMPLETED])
        assert [p.id for p in result] == ["1", "2", "4"]

    def test_pending_amount_hint_counts_as_active(self, resolver, projects):
        """A project with no status but money outstanding is active."""
        result = resolver.filter(projects, status_filters=["active"])
        assert [p.id for p in result] == ["1", "4"]

    def test_high_value(self, resolver, projects):
        """High value means amount at or above the threshold."""
        result = resolver.filter(projects, status_filters=["high_value"])
        assert [p.id for p in result] == ["1", "3"]

    def test_custom_threshold(self, projects):
        """The threshold is configurable."""
        resolver = ProjectFilterResolver(FilterParams(high_value_threshold=10000.0))
        assert len(resolver.filter(projects, status_filters=["high_value"])) == 3

    def test_outsourced(self, resolver, projects):
        """Test the outsourcing flag."""
        result = resolver.filter(projects, status_filters=["outsourced"])
        assert [p.id for p in result] == ["2"]

    def test_query_matches_fields(self, resolver, projects):
        """The query searches name, code and client case-insensitively."""
        assert [p.id for p in resolver.filter(projects, "wed")] == ["1"]
        assert [p.id for p in resolver.filter(projects, "prj003")] == ["3"]
        assert [p.id for p in resolver.filter(projects, "asha events")] == ["1"]

    def test_query_and_filters_combine(self, resolver, projects):
        """The query narrows the union of the selected filters."""
        result = resolver.filter(projects, "PRJ", status_filters=["completed", "pending"])
        assert [p.id for p in result] == ["2", "3"]

    def test_order_preserved(self, resolver, projects):
        """Filtering never reorders."""
        reversed_projects = list(reversed(projects))
        result = resolver.filter(reversed_projects, status_filters=["high_value", "outsourced"])
        assert [p.id for p in result] == ["3", "2", "1"]

    def test_unknown_key_raises(self, resolver, projects):
        """Test an unknown key string."""
        with pytest.raises(ValueError):
            resolver.filter(projects, status_filters=["starred"])


class TestUpcomingShoots:
    """Test upcoming shoot selection."""

    def test_future_shoots_sorted(self, resolver, projects, reference_now):
        """Only future shoots, soonest first; bad dates are left out."""
        result = resolver.upcoming_shoots(projects, now=reference_now)
        assert [p.id for p in result] == ["2", "1"]

    def test_limit(self, resolver, projects, reference_now):
        """Test the result limit."""
        result = resolver.upcoming_shoots(projects, now=reference_now, limit=1)
        assert [p.id for p in result] == ["2"]

    def test_zero_limit(self, resolver, projects, reference_now):
        """A zero limit returns no shoots."""
        assert resolver.upcoming_shoots(projects, now=reference_now, limit=0) == []

    @pytest.mark.parametrize("limit", [-1, True, 1.5])
    def test_invalid_limit(self, resolver, projects, reference_now, limit):
        """Negative or non-integer limits are rejected instead of slicing from the end."""
        with pytest.raises(ValueError, match="limit"):
            resolver.upcoming_shoots(projects, now=reference_now, limit=limit)

    def test_naive_now(self, resolver, projects):
        """A naive reference time is read as UTC."""
        result = resolver.upcoming_shoots(projects, now=datetime(2024, 4, 15))
        assert [p.id for p in result] == ["1"]


class TestCountByStatus:
    """Test status tab counts."""

    def test_counts(self, resolver, projects):
        """Every class is present, even with zero projects."""
        counts = resolver.count_by_status(projects)

        assert counts[StatusClass.ACTIVE] == 2
        assert counts[StatusClass.COMPLETED] == 1
        assert counts[StatusClass.PENDING] == 1
        assert counts[StatusClass.UNKNOWN] == 0
