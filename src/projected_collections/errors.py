"""Errors raised while translating source changes."""

from __future__ import annotations


class ProjectionError(Exception):
    """Base class for change translation failures."""


class UnsupportedChangeError(ProjectionError, NotImplementedError):
    """Raised when a change lacks the positional information needed to translate it."""


class InvalidChangeError(ProjectionError, ValueError):
    """Raised when a change descriptor is not one of the recognised kinds."""
