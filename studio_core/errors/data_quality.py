"""
Data quality error classifications for studio records.

These exceptions categorize problems found in project and series payloads
handed to the core by the API layer. All of them are recoverable: callers
skip the offending record or fall back to an empty collection.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MissingDataError(DataQualityError):
    """Required data is completely missing."""

    def __init__(self, message: str, data_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.data_type = data_type


class MalformedDataError(DataQualityError):
    """Data exists but is in incorrect format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format


class InconsistentSeriesError(MalformedDataError):
    """Series labels and values do not line up."""

    def __init__(self, message: str, label_count: Optional[int] = None,
                 value_count: Optional[int] = None, **kwargs):
        super().__init__(message, expected_format="len(labels) == len(values)", **kwargs)
        self.label_count = label_count
        self.value_count = value_count
