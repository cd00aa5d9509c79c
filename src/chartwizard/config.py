"""Wizard settings loading and validation."""

from __future__ import annotations

import logging
import os
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from chartwizard.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config", "WizardSettings"]

logger = logging.getLogger(__name__)


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def load(cls, yaml_path: str) -> Config:
        """Load wizard settings from a YAML file.

        Args:
            yaml_path: Path to the YAML settings file.

        Returns:
            A new Config wrapping the parsed mapping. An empty file yields
            an empty Config.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the YAML is invalid or its root is not a mapping.
        """
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Wizard settings must be a mapping, got {type(data).__name__}")

        logger.info("Loaded wizard settings from %s", yaml_path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current


class WizardSettings(BaseModel):
    """Typed view of the ``wizard`` section of a Config."""

    model_config = ConfigDict(frozen=True)

    default_branch: str = Field(default="main", min_length=1)

    @classmethod
    def from_config(cls, config: Config) -> WizardSettings:
        """Build settings from ``wizard.*`` keys, raising ConfigError on bad values."""
        section = config.get("wizard") or {}
        if not isinstance(section, dict):
            raise ConfigError(f"'wizard' must be a mapping, got {type(section).__name__}")
        try:
            return cls.model_validate(section)
        except ValidationError as e:
            raise ConfigError(f"Invalid wizard settings: {e}", cause=e) from e
