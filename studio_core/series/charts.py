"""Chart payload shaping for bar, line and pie widgets."""

import math
from collections.abc import Sequence
from typing import Any, Optional, Protocol

from ..config.defaults import ChartParams
from ..data.models import ChartPayload


class LabeledValues(Protocol):
    """Anything with parallel labels and values (RollingWindowSeries, NamedSeries)."""
    labels: Sequence[str]
    values: Sequence[Any]


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives, like JavaScript's Math.round."""
    return int(math.floor(value + 0.5))


def truncate_label(name: str, max_chars: int = 8, ellipsis: str = "...") -> str:
    """Shorten a legend label to `max_chars` characters plus an ellipsis."""
    if len(name) <= max_chars:
        return name
    return name[:max_chars] + ellipsis


def _number(value: Any) -> float:
    if value is None or isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if not math.isfinite(value):
        return 0
    return value


class ChartSeriesTransformer:
    """Builds ChartPayloads from aligned series and category breakdowns."""

    def __init__(self, params: Optional[ChartParams] = None):
        self.params = params or ChartParams()

    def bar_series(self, series: LabeledValues, color: Optional[str] = None) -> ChartPayload:
        """Pass labels and values through as a bar chart."""
        return self._passthrough("bar", series, color or self.params.income_color)

    def line_series(self, series: LabeledValues, color: Optional[str] = None) -> ChartPayload:
        """Pass labels and values through as a line chart."""
        return self._passthrough("line", series, color or self.params.income_color)

    def pie_series(self, labels: Sequence[str], amounts: Sequence[Any]) -> ChartPayload:
        """
        Build a pie chart with slice percentages and truncated legend labels.

        Args:
            labels: Category names
            amounts: Category totals, parallel to labels

        Returns:
            ChartPayload with percentages (all 0 when the total is 0)

        Raises:
            ValueError: If labels and amounts differ in length
        """
        if len(labels) != len(amounts):
            raise ValueError(f"{len(labels)} labels but {len(amounts)} amounts")

        values = tuple(_number(amount) for amount in amounts)
        total = sum(values)
        if total > 0:
            percentages = tuple(round_half_up(value / total * 100) for value in values)
        else:
            percentages = tuple(0 for _ in values)

        palette = self.params.pie_palette
        return ChartPayload(
            chart_type="pie",
            labels=tuple(labels),
            values=values,
            colors=tuple(palette[i % len(palette)] for i in range(len(values))),
            percentages=percentages,
            legend_labels=tuple(
                truncate_label(label, self.params.legend_max_chars, self.params.legend_ellipsis)
                for label in labels
            ),
            is_empty=self._all_zero(values),
        )

    def net_series(self, income: LabeledValues, expense: LabeledValues) -> ChartPayload:
        """
        Per-month income minus expense, coloured by sign.

        Raises:
            ValueError: If the two series do not share labels
        """
        if tuple(income.labels) != tuple(expense.labels):
            raise ValueError("income and expense series must share labels")

        nets = tuple(_number(i) - _number(e) for i, e in zip(income.values, expense.values))
        colors = tuple(
            self.params.profit_color if _number(i) >= _number(e) else self.params.loss_color
            for i, e in zip(income.values, expense.values)
        )
        return ChartPayload(
            chart_type="bar",
            labels=tuple(income.labels),
            values=nets,
            colors=colors,
            is_empty=self._all_zero(tuple(_number(v) for v in income.values))
            and self._all_zero(tuple(_number(v) for v in expense.values)),
        )

    def axis_max(self, values: Sequence[Any]) -> float:
        """Y-axis ceiling with headroom above the largest value."""
        numbers = [_number(v) for v in values]
        peak = max(numbers) if numbers else 0
        if peak > 0:
            return peak * self.params.axis_headroom
        return self.params.empty_axis_max

    def format_currency(self, value: float) -> str:
        """Compact currency label: ₹1.5M, ₹2.3K, ₹950."""
        sign = "-" if value < 0 else ""
        magnitude = abs(value)
        symbol = self.params.currency_symbol
        if magnitude >= 1_000_000:
            return f"{sign}{symbol}{magnitude / 1_000_000:.1f}M"
        if magnitude >= 1_000:
            return f"{sign}{symbol}{magnitude / 1_000:.1f}K"
        return f"{sign}{symbol}{magnitude:.0f}"

    def _passthrough(self, chart_type: str, series: LabeledValues, color: str) -> ChartPayload:
        values = tuple(_number(v) for v in series.values)
        return ChartPayload(
            chart_type=chart_type,
            labels=tuple(series.labels),
            values=values,
            colors=(color,),
            is_empty=self._all_zero(values),
        )

    @staticmethod
    def _all_zero(values: Sequence[float]) -> bool:
        return all(value == 0 for value in values)
