"""
Rolling month window alignment.

Dashboard charts always show the same number of months ending at the
current month, whatever the backend returned. Months the backend did not
report are zero-filled; months outside the window are ignored.

Series are matched by (year, month) when the payload carries periods.
Otherwise the long month name is the only key, so two entries with the same
name (e.g. February of two different years) collide; the most recent entry
wins and the collision is reported on the result.
"""

import math
from datetime import datetime
from typing import Any, Optional

from structlog.types import FilteringBoundLogger

from ..config.defaults import WindowParams
from ..data.models import NamedSeries, RollingWindowSeries
from ..logging.config import get_aggregation_logger
from ..utils.time import get_current_time, month_abbreviation, month_name, trailing_months

aggregation_logger = get_aggregation_logger(__name__)


def _clean_value(value: Any) -> float:
    """Missing, non-numeric and non-finite values count as zero."""
    if value is None or isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if not math.isfinite(value):
        return 0
    return value


class RollingWindowAligner:
    """Aligns named-month series onto a fixed trailing window."""

    def __init__(self, params: Optional[WindowParams] = None,
                 logger: Optional[FilteringBoundLogger] = None):
        self.params = params or WindowParams()
        self.logger = logger or aggregation_logger

    def align(self, series: NamedSeries, window_size: Optional[int] = None,
              now: Optional[datetime] = None) -> RollingWindowSeries:
        """
        Align a series onto the `window_size` months ending at `now`.

        Args:
            series: Source series
            window_size: Number of months; defaults to the configured size
            now: Reference time; defaults to the current UTC time

        Returns:
            RollingWindowSeries with exactly `window_size` labels and values

        Raises:
            ValueError: If window_size is not a positive integer
        """
        size = self.params.size if window_size is None else window_size
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise ValueError(f"window_size must be a positive integer, got {size!r}")

        targets = trailing_months(get_current_time(now), size)
        warnings: list[str] = []

        if series.periods is not None:
            by_period = self._index_by_period(series, warnings)
            raw_values = [by_period.get(target) for target in targets]
        else:
            by_name = self._index_by_name(series, warnings)
            raw_values = [by_name.get(month_name(month).lower()) for _, month in targets]

        for warning in warnings:
            self.logger.warning("Series alignment ambiguity", detail=warning)

        return RollingWindowSeries(
            labels=tuple(month_abbreviation(month, self.params.label_length) for _, month in targets),
            values=tuple(_clean_value(value) for value in raw_values),
            months=tuple(targets),
            warnings=tuple(warnings),
        )

    def _index_by_name(self, series: NamedSeries, warnings: list[str]) -> dict[str, Any]:
        index: dict[str, Any] = {}
        for label, value in zip(series.labels, series.values):
            key = label.strip().lower()
            if key in index:
                warnings.append(f"duplicate month label '{label.strip()}'; using the most recent entry")
            index[key] = value
        return index

    def _index_by_period(self, series: NamedSeries, warnings: list[str]) -> dict[tuple[int, int], Any]:
        index: dict[tuple[int, int], Any] = {}
        for period, value in zip(series.periods, series.values):
            if period in index:
                warnings.append(f"duplicate period {period[0]}-{period[1]:02d}; using the last entry")
            index[period] = value
        return index


def align_series(series: NamedSeries, window_size: int = 5, now: Optional[datetime] = None) -> RollingWindowSeries:
    """Align with default label settings."""
    return RollingWindowAligner().align(series, window_size=window_size, now=now)
