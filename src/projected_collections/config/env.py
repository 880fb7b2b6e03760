"""Environment variable loaders for configuration.

The library never loads a ``.env`` file itself. Applications embedding it call
``load_environment`` from their entry point, before the first projected list is
created, the same way an application calls ``load_dotenv()`` at startup.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Final

from dotenv import load_dotenv

from .errors import InvalidConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

ENV_PREFIX: Final[str] = "PROJECTED_COLLECTIONS_"

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


def load_environment(env_file: str | Path | None = None) -> bool:
    """Load ``env_file`` (or the nearest ``.env``) without overriding set variables."""

    return load_dotenv(env_file, override=False)


def read_bool_env(name: str, *, default: bool) -> bool:
    """Return a boolean environment variable, ``default`` when absent or blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise InvalidConfigurationError(f"Invalid boolean for {name}: {value!r}")
