"""Tests for chart payload shaping."""

import pytest

from studio_core.data.models import NamedSeries, RollingWindowSeries
from studio_core.series.charts import ChartSeriesTransformer, round_half_up, truncate_label


@pytest.fixture
def transformer() -> ChartSeriesTransformer:
    """Transformer with default parameters."""
    return ChartSeriesTransformer()


@pytest.fixture
def income_window() -> RollingWindowSeries:
    """Five-month income window."""
    return RollingWindowSeries(labels=("Dec", "Jan", "Feb", "Mar", "Apr"), values=(0, 10, 0, 30, 0))


class TestHelpers:
    """Test rounding and truncation helpers."""

    @pytest.mark.parametrize("value,expected", [(12.5, 13), (12.4, 12), (0.5, 1), (99.5, 100)])
    def test_round_half_up(self, value, expected):
        """Halves round up, unlike Python's banker's rounding."""
        assert round_half_up(value) == expected

    def test_truncate_label(self):
        """Long names are cut to 8 characters plus an ellipsis."""
        assert truncate_label("Equipment Rental") == "Equipmen..."
        assert truncate_label("Travel") == "Travel"
        assert truncate_label("Exactly8") == "Exactly8"


class TestBarAndLine:
    """Test pass-through series charts."""

    def test_bar_passthrough(self, transformer, income_window):
        """Labels and values pass through unchanged."""
        chart = transformer.bar_series(income_window)

        assert chart.chart_type == "bar"
        assert chart.labels == income_window.labels
        assert chart.values == (0, 10, 0, 30, 0)
        assert chart.colors == ("#4285F4",)
        assert chart.is_empty is False

    def test_all_zero_is_empty(self, transformer):
        """An all-zero series is flagged for the empty-state placeholder."""
        chart = transformer.line_series(RollingWindowSeries(labels=("Jan", "Feb"), values=(0, 0)), color="#FF6B6B")

        assert chart.chart_type == "line"
        assert chart.is_empty is True
        assert chart.colors == ("#FF6B6B",)

    def test_missing_values_zeroed(self, transformer):
        """Raw NamedSeries values that are missing chart as zero."""
        chart = transformer.bar_series(NamedSeries(labels=("Jan",), values=(None,)))
        assert chart.values == (0,)


class TestPieSeries:
    """Test pie chart construction."""

    def test_percentages(self, transformer):
        """Slices get rounded percentages of the total."""
        chart = transformer.pie_series(["Equipment Rental", "Travel", "Food"], [500, 300, 200])

        assert chart.percentages == (50, 30, 20)
        assert chart.legend_labels == ("Equipmen...", "Travel", "Food")
        assert chart.labels == ("Equipment Rental", "Travel", "Food")
        assert chart.colors == ("#FF6B6B", "#4285F4", "#34A853")

    def test_half_percent_rounds_up(self, transformer):
        """1/8 is 12.5% and rounds to 13."""
        chart = transformer.pie_series(["a", "b"], [1, 7])
        assert chart.percentages == (13, 88)

    def test_zero_total(self, transformer):
        """A zero total yields zero percentages, not a division error."""
        chart = transformer.pie_series(["a", "b"], [0, 0])

        assert chart.percentages == (0, 0)
        assert chart.is_empty is True

    def test_palette_cycles(self, transformer):
        """More slices than colours reuse the palette."""
        chart = transformer.pie_series([str(i) for i in range(11)], [1] * 11)
        assert chart.colors[10] == chart.colors[0]

    def test_length_mismatch(self, transformer):
        """Test mismatched labels and amounts."""
        with pytest.raises(ValueError):
            transformer.pie_series(["a"], [1, 2])

    def test_payload(self, transformer):
        """Pie payloads include percentages and legend labels."""
        payload = transformer.pie_series(["Food"], [10]).to_payload()

        assert payload["type"] == "pie"
        assert payload["percentages"] == [100]
        assert payload["legendLabels"] == ["Food"]
        assert payload["isEmpty"] is False


class TestNetAndAxis:
    """Test net series, axis scaling and currency labels."""

    def test_net_series(self, transformer):
        """Net is income minus expense, coloured by sign."""
        income = RollingWindowSeries(labels=("Mar", "Apr"), values=(100, 50))
        expense = RollingWindowSeries(labels=("Mar", "Apr"), values=(40, 80))

        chart = transformer.net_series(income, expense)

        assert chart.values == (60, -30)
        assert chart.colors == ("#34A853", "#EA4335")

    def test_net_series_label_mismatch(self, transformer):
        """Test series over different windows."""
        with pytest.raises(ValueError):
            transformer.net_series(
                RollingWindowSeries(labels=("Mar",), values=(1,)),
                RollingWindowSeries(labels=("Apr",), values=(1,)),
            )

    def test_axis_max(self, transformer):
        """The axis leaves 20% headroom, or defaults to 100."""
        assert transformer.axis_max([10, 50]) == pytest.approx(60.0)
        assert transformer.axis_max([0, 0]) == 100.0
        assert transformer.axis_max([]) == 100.0

    @pytest.mark.parametrize("value,expected", [
        (1_500_000, "₹1.5M"),
        (2_300, "₹2.3K"),
        (950, "₹950"),
        (-4_000, "-₹4.0K"),
    ])
    def test_format_currency(self, transformer, value, expected):
        """Test compact currency labels."""
        assert transformer.format_currency(value) == expected
