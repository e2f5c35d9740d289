"""
Error handling tests for the aggregation core.

Tests cover the error classification and how malformed data is contained.
"""

import pytest

from studio_core.data.models import NamedSeries
from studio_core.errors import (
    DataQualityError,
    DataSourceError,
    InconsistentSeriesError,
    MalformedDataError,
    MissingDataError,
    SystemFailureError,
)


class TestErrorClassification:
    """Test error classification system."""

    def test_data_quality_error_hierarchy(self):
        """Test that data quality errors have proper hierarchy."""
        base_error = DataQualityError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        missing_error = MissingDataError("missing data", data_type="project.id")
        assert isinstance(missing_error, DataQualityError)
        assert missing_error.data_type == "project.id"

        malformed_error = MalformedDataError("bad", raw_data="x", expected_format="number",
                                             context={"index": 3})
        assert malformed_error.raw_data == "x"
        assert malformed_error.context == {"index": 3}

    def test_inconsistent_series_is_malformed(self):
        """Series mismatches are a kind of malformed data."""
        error = InconsistentSeriesError("mismatch", label_count=2, value_count=1)

        assert isinstance(error, MalformedDataError)
        assert error.recoverable is True
        assert error.expected_format == "len(labels) == len(values)"

    def test_system_failure_error_hierarchy(self):
        """Test that system failure errors have proper hierarchy."""
        error = DataSourceError("backend down", source="api", operation="fetch_projects")

        assert isinstance(error, SystemFailureError)
        assert error.recoverable is False
        assert error.source == "api"
        assert error.operation == "fetch_projects"


class TestSeriesConstruction:
    """Test that inconsistent series are rejected at construction."""

    def test_mismatched_lengths(self):
        """Test labels and values of different lengths."""
        with pytest.raises(InconsistentSeriesError):
            NamedSeries(labels=("January",), values=())

    def test_mismatched_periods(self):
        """Test a periods list of the wrong length."""
        with pytest.raises(InconsistentSeriesError):
            NamedSeries(labels=("January",), values=(1,), periods=())

    def test_lists_frozen_to_tuples(self):
        """Sequences are stored as tuples."""
        series = NamedSeries(labels=["January"], values=[1], periods=[[2024, 1]])

        assert series.labels == ("January",)
        assert series.periods == ((2024, 1),)
