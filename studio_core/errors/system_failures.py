"""
System failure error classifications.

These exceptions represent failures outside the record data itself, such as
an unreachable backend. The engine converts them into empty input so the
aggregation layer never sees them.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class DataSourceError(SystemFailureError):
    """A data source could not deliver its payload."""

    def __init__(self, message: str, source: Optional[str] = None,
                 operation: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source
        self.operation = operation
