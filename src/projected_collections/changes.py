"""Index-bearing change descriptors emitted by observable sequences.

One descriptor describes one mutation batch:
- ``AddChange`` / ``RemoveChange`` carry the affected items and their start index
- ``ReplaceChange`` carries both the incoming and outgoing items
- ``MoveChange`` carries the moved items with both positions
- ``ResetChange`` means the content changed dramatically and must be re-read

An index of ``None`` means the emitter did not know the position.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal


class CollectionAction(StrEnum):
    """Kind of mutation reported by an observable sequence."""

    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    RESET = "reset"


@dataclass(frozen=True, slots=True, kw_only=True)
class AddChange[T]:
    """Items were inserted starting at ``new_index``."""

    new_items: tuple[T, ...]
    new_index: int | None = None
    action: Literal[CollectionAction.ADD] = CollectionAction.ADD


@dataclass(frozen=True, slots=True, kw_only=True)
class RemoveChange[T]:
    """Items were removed starting at ``old_index``."""

    old_items: tuple[T, ...]
    old_index: int | None = None
    action: Literal[CollectionAction.REMOVE] = CollectionAction.REMOVE


@dataclass(frozen=True, slots=True, kw_only=True)
class ReplaceChange[T]:
    """``old_items`` were overwritten by ``new_items``."""

    new_items: tuple[T, ...]
    old_items: tuple[T, ...]
    new_index: int | None = None
    old_index: int | None = None
    action: Literal[CollectionAction.REPLACE] = CollectionAction.REPLACE


@dataclass(frozen=True, slots=True, kw_only=True)
class MoveChange[T]:
    """``items`` moved from ``old_index`` to ``new_index``."""

    items: tuple[T, ...]
    new_index: int | None = None
    old_index: int | None = None
    action: Literal[CollectionAction.MOVE] = CollectionAction.MOVE


@dataclass(frozen=True, slots=True, kw_only=True)
class ResetChange:
    """The sequence was cleared or otherwise changed beyond description."""

    action: Literal[CollectionAction.RESET] = CollectionAction.RESET


type CollectionChange[T] = (
    AddChange[T] | RemoveChange[T] | ReplaceChange[T] | MoveChange[T] | ResetChange
)
