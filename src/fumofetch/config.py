"""
Configuration management for Fumofetch.

Supports an optional YAML file, environment variables and programmatic
access. Nothing is read implicitly: with no file and no FUMOFETCH_*
variables every setting keeps its default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

SECTIONS = ("display", "probes", "logging")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when a configuration value is invalid."""


@dataclass
class Config:
    """
    Configuration container for Fumofetch.

    Priority (highest to lowest):
    1. Environment variables (prefixed with FUMOFETCH_)
    2. Config file values
    3. Default values
    """

    # Display settings
    logo_path: str | None = None
    padding: int = 4

    # Probe settings
    command_timeout: float | None = None

    # Logging
    log_level: str = "WARNING"
    log_file: str | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Check value ranges.

        Raises:
            ConfigError: If a setting is out of range.
        """
        if isinstance(self.padding, bool) or not isinstance(self.padding, int):
            raise ConfigError(f"padding must be an integer, got {self.padding!r}")
        if self.padding < 0:
            raise ConfigError(f"padding must not be negative, got {self.padding}")
        if self.command_timeout is not None and (
            isinstance(self.command_timeout, bool)
            or not isinstance(self.command_timeout, (int, float))
        ):
            raise ConfigError(f"command_timeout must be a number, got {self.command_timeout!r}")
        if self.command_timeout is not None and self.command_timeout <= 0:
            raise ConfigError(f"command_timeout must be positive, got {self.command_timeout}")
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_file(cls, path: str | Path) -> Config:
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """
        Create config from a dictionary.

        Accepts either flat keys or the sections written by to_dict().
        Unknown keys are ignored.
        """
        known_fields = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}

        for key, value in data.items():
            if key in SECTIONS and isinstance(value, dict):
                values.update((k, v) for k, v in value.items() if k in known_fields)
            elif key in known_fields:
                values[key] = value

        return cls(**values)

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> Config:
        """
        Load configuration with full resolution order.

        Args:
            config_path: Path to a YAML config file. If None, only defaults
                        and environment variables are used.

        Returns:
            Fully resolved Config instance.

        Raises:
            ConfigError: If a file or environment value is invalid.
        """
        config = cls.from_file(config_path) if config_path else cls()
        config._apply_env_overrides()
        config.validate()
        return config

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides."""
        env_mappings = {
            "FUMOFETCH_LOGO": ("logo_path", str),
            "FUMOFETCH_PADDING": ("padding", int),
            "FUMOFETCH_COMMAND_TIMEOUT": ("command_timeout", float),
            "FUMOFETCH_LOG_LEVEL": ("log_level", str),
            "FUMOFETCH_LOG_FILE": ("log_file", str),
        }

        for env_var, (attr, convert) in env_mappings.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            try:
                setattr(self, attr, convert(value))
            except ValueError as e:
                raise ConfigError(f"Invalid value for {env_var}: {value!r}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "display": {
                "logo_path": self.logo_path,
                "padding": self.padding,
            },
            "probes": {
                "command_timeout": self.command_timeout,
            },
            "logging": {
                "log_level": self.log_level,
                "log_file": self.log_file,
            },
        }
