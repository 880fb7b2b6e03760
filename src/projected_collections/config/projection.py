"""Behaviour switches for projected lists."""

from __future__ import annotations

from dataclasses import dataclass

from .env import ENV_PREFIX, read_bool_env

DISPOSE_REMOVED_ENV = f"{ENV_PREFIX}DISPOSE_REMOVED"


@dataclass(frozen=True, slots=True)
class ProjectionConfig:
    """Holds projected-list behaviour settings.

    ``dispose_removed`` controls whether items leaving a projected list are disposed.
    """

    dispose_removed: bool = True


def get_projection_config() -> ProjectionConfig:
    return ProjectionConfig(dispose_removed=read_bool_env(DISPOSE_REMOVED_ENV, default=True))
