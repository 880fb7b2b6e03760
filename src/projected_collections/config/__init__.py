"""Application configuration helpers."""

from __future__ import annotations

from .env import load_environment, read_bool_env
from .errors import ConfigurationError, InvalidConfigurationError
from .logging import configure_logging, get_log_level
from .projection import ProjectionConfig, get_projection_config

__all__ = [
    "ConfigurationError",
    "InvalidConfigurationError",
    "ProjectionConfig",
    "configure_logging",
    "get_log_level",
    "get_projection_config",
    "load_environment",
    "read_bool_env",
]
