"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import (
    CalendarParams,
    ChartParams,
    DefaultConfig,
    FilterParams,
    StatusParams,
    WindowParams,
    get_default_config,
)
from .validation import ConfigValidator

CONFIG_FILENAME = "studio.yaml"

SECTION_TYPES: dict[str, type] = {
    "calendar": CalendarParams,
    "status": StatusParams,
    "window": WindowParams,
    "chart": ChartParams,
    "filters": FilterParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """
        Load deployment overrides from studio.yaml, if present.

        Raises:
            ValueError: If the file's top level is not a mapping
        """
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        with open(config_file, encoding="utf-8") as f:
            file_config = yaml.safe_load(f)

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ValueError(
                f"Invalid configuration: {config_file} must contain a mapping of sections "
                f"(got: {type(file_config).__name__})"
            )

        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Call-site overrides (highest priority)
        2. studio.yaml in the config directory
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_config(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Build a validated DefaultConfig from the merged configuration.

        Raises:
            ValueError: If any merged parameter fails validation
        """
        merged = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            details = "; ".join(f"{err.field}: {err.message} (got: {err.value!r})" for err in errors)
            raise ValueError(f"Invalid configuration: {details}")

        sections = {}
        for section, params_type in SECTION_TYPES.items():
            values = merged.get(section, {})
            kwargs = {}
            for f in fields(params_type):
                if f.name not in values:
                    continue
                value = values[f.name]
                # YAML has no tuples
                if isinstance(value, list):
                    value = tuple(value)
                kwargs[f.name] = value
            sections[section] = params_type(**kwargs)

        return DefaultConfig(**sections)

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def load_config(config_dir: Optional[Path] = None,
                overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
    """Shortcut for ConfigLoader.create(config_dir).load_config(overrides)."""
    return ConfigLoader.create(config_dir).load_config(overrides)
