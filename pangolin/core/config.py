"""Configuration management with environment variable integration and validation."""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from pydantic import ValidationError

from .types import PangolinConfig
from .errors import ConfigurationError


def load_env_overrides(prefix: str = "PANGOLIN_") -> Dict[str, Any]:
    """Load environment variables with the given prefix and convert to appropriate types."""
    overrides: Dict[str, Any] = {}

    for key, value in os.environ.items():
        if not key.startswith(prefix):
            continue
        field_name = key[len(prefix):].lower()

        # Nested sections, e.g. PANGOLIN_PACKING__NUM_BUNDLES
        if "__" in field_name:
            parts = field_name.split("__")
            if len(parts) == 2:
                section, sub_field = parts
                overrides.setdefault(section, {})[sub_field] = _convert_env_value(value)
            continue

        overrides[field_name] = _convert_env_value(value)

    return overrides


def _convert_env_value(value: str) -> Any:
    """Convert string environment value to appropriate Python type."""
    if not value:
        return None

    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    if value.lower() in ("true", "yes", "on"):
        return True
    if value.lower() in ("false", "no", "off"):
        return False

    if "," in value:
        return [item.strip() for item in value.split(",")]

    return value


def _merge(base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
    """Merge nested sections one level deep, later values winning."""
    merged = dict(base)
    for key, value in update.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


class ConfigManager:
    """Central configuration management."""

    def __init__(self) -> None:
        self._config: Optional[PangolinConfig] = None

    def load_config(
        self, config_file: Optional[Path] = None, **overrides: Any
    ) -> PangolinConfig:
        """Load configuration from file and environment with CLI overrides.

        Precedence, highest first: CLI overrides, environment variables,
        config file, model defaults.
        """
        config_data: Dict[str, Any] = {}

        if config_file is not None:
            config_file = Path(config_file)
            if not config_file.exists():
                raise ConfigurationError(f"Config file not found: {config_file}")
            config_data = _merge(config_data, self._load_from_file(config_file))

        config_data = _merge(config_data, load_env_overrides())
        config_data = _merge(config_data, overrides)

        try:
            self._config = PangolinConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e}", details={"errors": e.errors()}
            ) from e

        return self._config

    def get_config(self) -> PangolinConfig:
        """Get current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def _load_from_file(self, config_file: Path) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if config_file.suffix.lower() not in (".yml", ".yaml"):
            raise ConfigurationError(
                f"Unsupported config file format: {config_file.suffix}"
            )
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to load config file {config_file}: {e}"
            ) from e
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {config_file} must contain a mapping at the top level"
            )
        return data


# Global config manager instance
_config_manager = ConfigManager()


def load_config(config_file: Optional[Path] = None, **kwargs: Any) -> PangolinConfig:
    """Load global configuration."""
    return _config_manager.load_config(config_file, **kwargs)


def get_config() -> PangolinConfig:
    """Get current global configuration."""
    return _config_manager.get_config()
