"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


class InvalidConfigurationError(ConfigurationError):
    """Raised when a configuration value is present but cannot be parsed."""
