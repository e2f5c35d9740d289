"""
Error classification system for the aggregation core.

Data quality errors describe bad records and are always recoverable.
System failures describe sources that could not deliver data at all.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
    InconsistentSeriesError,
)
from .system_failures import (
    SystemFailureError,
    DataSourceError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    "InconsistentSeriesError",
    # System Failures
    "SystemFailureError",
    "DataSourceError",
]
