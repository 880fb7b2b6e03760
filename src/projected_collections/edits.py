"""Edits a projected list applies in response to one source change.

Adapters translate source descriptors into a tuple of edits; the projected list
applies them in order. Edits carry source items, never projected ones, so the
projection runs only when an edit is applied.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class InsertItems[T]:
    """Project ``items`` and insert them at ``index``; ``None`` appends."""

    items: tuple[T, ...]
    index: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class RemoveAt:
    """Remove the projected item at ``index``."""

    index: int


@dataclass(frozen=True, slots=True, kw_only=True)
class ReplaceAt[T]:
    """Overwrite the projected item at ``index`` with the projection of ``item``."""

    index: int
    item: T


@dataclass(frozen=True, slots=True)
class Clear:
    """Remove every projected item."""


type ProjectionEdit[T] = InsertItems[T] | RemoveAt | ReplaceAt[T] | Clear
