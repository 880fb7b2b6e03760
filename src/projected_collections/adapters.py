"""Source adapters translating change descriptors into projection edits.

Each adapter pairs one kind of source with its translation table. The
projected list stays agnostic of the source flavour: it asks the adapter for a
snapshot, connects an ``apply`` callback and receives ready-made edits.

Translation is rejected before any edit is produced whenever the descriptor
shape alone makes it untranslatable (unknown positions, moves, foreign kinds).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from .changes import AddChange, MoveChange, RemoveChange, ReplaceChange, ResetChange
from .edits import Clear, InsertItems, RemoveAt, ReplaceAt
from .errors import InvalidChangeError, UnsupportedChangeError
from .list_changes import (
    ItemAdded,
    ItemChanged,
    ItemDeleted,
    ItemMoved,
    ListReset,
    PropertyDescriptorChanged,
)

if TYPE_CHECKING:
    from .changes import CollectionChange
    from .edits import ProjectionEdit
    from .list_changes import ListChange
    from .subscription import Subscription

log = logging.getLogger(__name__)

type EditSink[T] = Callable[[tuple[ProjectionEdit[T], ...]], None]


class NotifiesCollectionChanged[T](Iterable[T], Protocol):
    """Iterable source reporting index-bearing ``CollectionChange`` batches."""

    def subscribe(self, handler: Callable[[CollectionChange[T]], None]) -> Subscription: ...


class NotifiesListChanged[T](Iterable[T], Protocol):
    """Indexable source reporting single-item ``ListChange`` notifications."""

    def __getitem__(self, index: int) -> T: ...

    def subscribe(self, handler: Callable[[ListChange], None]) -> Subscription: ...


class SourceAdapter[T](Protocol):
    """What a projected list needs from its source."""

    def snapshot(self) -> tuple[T, ...]: ...

    def connect(self, sink: EditSink[T]) -> Subscription: ...


def _reject(change: object, reason: str) -> UnsupportedChangeError:
    log.warning("Rejected %r: %s", change, reason)
    return UnsupportedChangeError(reason)


def _invalid(change: object) -> InvalidChangeError:
    log.warning("Rejected unknown change descriptor %r", change)
    return InvalidChangeError(f"Unknown change descriptor: {change!r}")


@dataclass(slots=True)
class ObservableSourceAdapter[T]:
    """Translate ``CollectionChange`` batches from an observable sequence."""

    source: NotifiesCollectionChanged[T]

    def snapshot(self) -> tuple[T, ...]:
        return tuple(self.source)

    def connect(self, sink: EditSink[T]) -> Subscription:
        def on_collection_changed(change: CollectionChange[T]) -> None:
            sink(self.translate(change))

        return self.source.subscribe(on_collection_changed)

    def translate(self, change: CollectionChange[T]) -> tuple[ProjectionEdit[T], ...]:
        match change:
            case AddChange(new_items=items, new_index=index):
                return (InsertItems(items=items, index=index),)
            case RemoveChange(old_index=None):
                raise _reject(
                    change,
                    "Cannot remove items from projected list when index is unknown",
                )
            case RemoveChange(old_items=items, old_index=int() as index):
                # highest index first so pending positions stay valid
                return tuple(
                    RemoveAt(index=position)
                    for position in reversed(range(index, index + len(items)))
                )
            case ReplaceChange(
                new_items=items, new_index=int() as index, old_index=old_index
            ) if index == old_index:
                return tuple(
                    ReplaceAt(index=index + offset, item=item) for offset, item in enumerate(items)
                )
            case ReplaceChange():
                raise _reject(
                    change,
                    "Cannot replace items in projected list when index is unknown "
                    "or differs from the old index",
                )
            case MoveChange():
                raise _reject(change, "Cannot move items in projected list")
            case ResetChange():
                return (Clear(),)
            case _:
                raise _invalid(change)


@dataclass(slots=True)
class BindingSourceAdapter[T]:
    """Translate single-item ``ListChange`` notifications from a binding list.

    Added items are always appended, whatever position the source reports, and
    in-place item changes are not propagated.
    """

    source: NotifiesListChanged[T]

    def snapshot(self) -> tuple[T, ...]:
        return tuple(self.source)

    def connect(self, sink: EditSink[T]) -> Subscription:
        def on_list_changed(change: ListChange) -> None:
            sink(self.translate(change))

        return self.source.subscribe(on_list_changed)

    def translate(self, change: ListChange) -> tuple[ProjectionEdit[T], ...]:
        match change:
            case ListReset():
                return (Clear(), InsertItems(items=self.snapshot()))
            case ItemAdded(new_index=index):
                return (InsertItems(items=(self.source[index],)),)
            case ItemDeleted(old_index=index):
                return (RemoveAt(index=index),)
            case ItemMoved():
                raise _reject(change, "Moving items is not implemented for projected lists")
            case ItemChanged() | PropertyDescriptorChanged():
                return ()
            case _:
                raise _invalid(change)
