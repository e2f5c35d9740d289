"""Default configuration parameters for the studio aggregation core."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CalendarParams:
    """Calendar event styling."""
    start_color: str = "#4CAF50"                     # Open project, start day
    end_color: str = "#F44336"                       # Open project, end day
    completed_color: str = "#9E9E9E"                 # Any side of a completed project
    calendar_entry_color: str = "#4ECDC4"            # Standalone calendar entries
    completed_suffix: str = " (Completed)"
    untitled_project: str = "Untitled Project"
    missing_code: str = "N/A"


@dataclass(frozen=True)
class StatusParams:
    """Status vocabulary, matched after lower-casing and folding spaces/hyphens to '_'."""
    completed: tuple[str, ...] = ("completed", "finished", "done")
    active: tuple[str, ...] = ("active", "ongoing", "in_progress")
    pending: tuple[str, ...] = ("pending", "on_hold", "draft")


@dataclass(frozen=True)
class WindowParams:
    """Rolling chart window parameters."""
    size: int = 5                      # Months shown on dashboard charts
    label_length: int = 3              # "February" -> "Feb"


@dataclass(frozen=True)
class ChartParams:
    """Chart payload parameters."""
    legend_max_chars: int = 8
    legend_ellipsis: str = "..."
    axis_headroom: float = 1.2
    empty_axis_max: float = 100.0
    currency_symbol: str = "₹"
    income_color: str = "#4285F4"
    expense_color: str = "#FF6B6B"
    projects_color: str = "#34A853"
    profit_color: str = "#34A853"
    loss_color: str = "#EA4335"
    pie_palette: tuple[str, ...] = (
        "#FF6B6B", "#4285F4", "#34A853", "#FBBC04", "#EA4335",
        "#9C27B0", "#FF5722", "#607D8B", "#795548", "#009688",
    )


@dataclass(frozen=True)
class FilterParams:
    """Project list filter parameters."""
    high_value_threshold: float = 50000.0
    upcoming_limit: int = 5


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    calendar: CalendarParams
    status: StatusParams
    window: WindowParams
    chart: ChartParams
    filters: FilterParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        calendar=CalendarParams(),
        status=StatusParams(),
        window=WindowParams(),
        chart=ChartParams(),
        filters=FilterParams(),
    )
