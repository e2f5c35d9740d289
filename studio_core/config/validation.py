"""Configuration validation utilities."""

import re
from dataclasses import dataclass, fields
from typing import Any

from .defaults import CalendarParams, ChartParams, FilterParams, StatusParams, WindowParams

HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

KNOWN_FIELDS: dict[str, set[str]] = {
    "calendar": {f.name for f in fields(CalendarParams)},
    "status": {f.name for f in fields(StatusParams)},
    "window": {f.name for f in fields(WindowParams)},
    "chart": {f.name for f in fields(ChartParams)},
    "filters": {f.name for f in fields(FilterParams)},
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_hex_color(value: Any) -> bool:
    return isinstance(value, str) and HEX_COLOR.match(value) is not None


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_calendar_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate calendar styling parameters."""
        errors = []

        for name in ("start_color", "end_color", "completed_color", "calendar_entry_color"):
            if name in params and not _is_hex_color(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a hex color like '#4CAF50'",
                    value=params[name]
                ))

        for name in ("completed_suffix", "untitled_project", "missing_code"):
            if name in params and not isinstance(params[name], str):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a string",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_status_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate status vocabulary."""
        errors = []

        for name in ("completed", "active", "pending"):
            if name not in params:
                continue
            value = params[name]
            if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) and v for v in value):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a list of non-empty strings",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_window_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate rolling window parameters."""
        errors = []

        if "size" in params and not _is_positive_int(params["size"]):
            errors.append(ValidationError(
                field="size",
                message="Must be a positive integer",
                value=params["size"]
            ))

        if "label_length" in params and not _is_positive_int(params["label_length"]):
            errors.append(ValidationError(
                field="label_length",
                message="Must be a positive integer",
                value=params["label_length"]
            ))

        return errors

    @staticmethod
    def validate_chart_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate chart payload parameters."""
        errors = []

        if "legend_max_chars" in params and not _is_positive_int(params["legend_max_chars"]):
            errors.append(ValidationError(
                field="legend_max_chars",
                message="Must be a positive integer",
                value=params["legend_max_chars"]
            ))

        if "axis_headroom" in params:
            value = params["axis_headroom"]
            if not _is_number(value) or value < 1:
                errors.append(ValidationError(
                    field="axis_headroom",
                    message="Must be a number >= 1",
                    value=value
                ))

        if "empty_axis_max" in params:
            value = params["empty_axis_max"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="empty_axis_max",
                    message="Must be a positive number",
                    value=value
                ))

        for name in ("income_color", "expense_color", "projects_color", "profit_color", "loss_color"):
            if name in params and not _is_hex_color(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a hex color like '#4285F4'",
                    value=params[name]
                ))

        if "pie_palette" in params:
            value = params["pie_palette"]
            if not isinstance(value, (list, tuple)) or not value or not all(_is_hex_color(c) for c in value):
                errors.append(ValidationError(
                    field="pie_palette",
                    message="Must be a non-empty list of hex colors",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_filter_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate project filter parameters."""
        errors = []

        if "high_value_threshold" in params:
            value = params["high_value_threshold"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="high_value_threshold",
                    message="Must be a non-negative number",
                    value=value
                ))

        if "upcoming_limit" in params and not _is_positive_int(params["upcoming_limit"]):
            errors.append(ValidationError(
                field="upcoming_limit",
                message="Must be a positive integer",
                value=params["upcoming_limit"]
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, params in config.items():
            if section not in KNOWN_FIELDS:
                errors.append(ValidationError(field=section, message="Unknown section", value=params))
                continue
            if not isinstance(params, dict):
                errors.append(ValidationError(field=section, message="Must be a mapping", value=params))
                continue
            for name in params:
                if name not in KNOWN_FIELDS[section]:
                    errors.append(ValidationError(
                        field=f"{section}.{name}",
                        message="Unknown parameter",
                        value=params[name]
                    ))

        validators = {
            "calendar": ConfigValidator.validate_calendar_params,
            "status": ConfigValidator.validate_status_params,
            "window": ConfigValidator.validate_window_params,
            "chart": ConfigValidator.validate_chart_params,
            "filters": ConfigValidator.validate_filter_params,
        }
        for section, validate in validators.items():
            if isinstance(config.get(section), dict):
                errors.extend(validate(config[section]))

        return errors
