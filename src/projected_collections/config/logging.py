"""Shared logging helpers.

Library modules only create loggers. ``configure_logging`` is for the embedding
application's entry point; the library never installs handlers on import.
"""

from __future__ import annotations

import logging
import os

from .env import ENV_PREFIX
from .errors import InvalidConfigurationError

LOG_LEVEL_ENV = f"{ENV_PREFIX}LOG_LEVEL"


def get_log_level() -> int:
    """Return the level named by ``PROJECTED_COLLECTIONS_LOG_LEVEL`` (default INFO)."""

    value = os.getenv(LOG_LEVEL_ENV)
    if value is None or not value.strip():
        return logging.INFO
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise InvalidConfigurationError(f"Invalid log level for {LOG_LEVEL_ENV}: {value!r}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: the level
    comes from the environment unless given, and the format is terse. Pass
    ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(
        level=get_log_level() if level is None else level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
