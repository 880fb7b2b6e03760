"""Sequences that report every mutation as a ``CollectionChange``.

``ObservableSequence`` is read-only from the outside: it mutates itself only
through the protected ``_*_item(s)`` hooks, each of which updates storage first
and then calls ``_on_collection_changed``. Subclasses extend behaviour by
overriding those hooks. ``ObservableList`` adds the public mutable-sequence
surface on top of the same hooks.
"""

from __future__ import annotations

import logging
from collections.abc import MutableSequence, Sequence
from typing import TYPE_CHECKING, overload

from .changes import AddChange, MoveChange, RemoveChange, ReplaceChange, ResetChange
from .subscription import HandlerRegistry

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from .changes import CollectionChange
    from .subscription import Subscription

log = logging.getLogger(__name__)


class ObservableSequence[T](Sequence[T]):
    """Ordered, indexable sequence emitting index-bearing change descriptors."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._collection_changed: HandlerRegistry[CollectionChange[T]] = HandlerRegistry()

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def subscribe(self, handler: Callable[[CollectionChange[T]], None]) -> Subscription:
        """Register ``handler`` for every subsequent change, in mutation order."""

        return self._collection_changed.add(handler)

    def _resolve_index(self, index: int) -> int:
        size = len(self._items)
        resolved = index + size if index < 0 else index
        if not 0 <= resolved < size:
            raise IndexError(f"{type(self).__name__} index {index} out of range")
        return resolved

    def _insert_items(self, index: int, items: Iterable[T]) -> None:
        if not 0 <= index <= len(self._items):
            raise IndexError(f"{type(self).__name__} insert index {index} out of range")
        new_items = tuple(items)
        if not new_items:
            return
        self._items[index:index] = new_items
        self._on_collection_changed(AddChange(new_items=new_items, new_index=index))

    def _remove_items(self, index: int, count: int = 1) -> None:
        if count < 0:
            raise ValueError("Cannot remove a negative number of items")
        if index < 0 or index + count > len(self._items):
            raise IndexError(
                f"{type(self).__name__} cannot remove {count} item(s) at index {index}"
            )
        if count == 0:
            return
        old_items = tuple(self._items[index : index + count])
        del self._items[index : index + count]
        self._on_collection_changed(RemoveChange(old_items=old_items, old_index=index))

    def _set_item(self, index: int, item: T) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"{type(self).__name__} index {index} out of range")
        old_item = self._items[index]
        self._items[index] = item
        self._on_collection_changed(
            ReplaceChange(
                new_items=(item,),
                old_items=(old_item,),
                new_index=index,
                old_index=index,
            )
        )

    def _move_item(self, old_index: int, new_index: int) -> None:
        item = self._items.pop(old_index)
        self._items.insert(new_index, item)
        self._on_collection_changed(
            MoveChange(items=(item,), new_index=new_index, old_index=old_index)
        )

    def _clear_items(self) -> None:
        self._items.clear()
        self._on_collection_changed(ResetChange())

    def _on_collection_changed(self, change: CollectionChange[T]) -> None:
        log.debug("%s %s", type(self).__name__, change.action)
        self._collection_changed.notify(change)


class ObservableList[T](ObservableSequence[T], MutableSequence[T]):
    """Mutable list reporting each mutation to its subscribers.

    Single-item operations follow ``list`` semantics for index handling. Slice
    assignment and deletion are rejected because a strided change cannot be
    described by one start index; use ``insert_range``/``remove_range`` for
    contiguous batches.
    """

    @overload
    def __setitem__(self, index: int, value: T) -> None: ...

    @overload
    def __setitem__(self, index: slice, value: Iterable[T]) -> None: ...

    def __setitem__(self, index: int | slice, value: T | Iterable[T]) -> None:
        if isinstance(index, slice):
            raise TypeError(f"{type(self).__name__} does not support slice assignment")
        self._set_item(self._resolve_index(index), value)  # type: ignore[arg-type]

    def __delitem__(self, index: int | slice) -> None:
        if isinstance(index, slice):
            raise TypeError(f"{type(self).__name__} does not support slice deletion")
        self._remove_items(self._resolve_index(index))

    def insert(self, index: int, value: T) -> None:
        size = len(self._items)
        position = max(0, size + index) if index < 0 else min(index, size)
        self._insert_items(position, (value,))

    def insert_range(self, index: int, values: Iterable[T]) -> None:
        """Insert ``values`` at ``index`` and report them as one batch."""

        self._insert_items(index, values)

    def remove_range(self, index: int, count: int) -> None:
        """Remove ``count`` items starting at ``index`` and report them as one batch."""

        self._remove_items(index, count)

    def move(self, old_index: int, new_index: int) -> None:
        self._move_item(self._resolve_index(old_index), self._resolve_index(new_index))

    def clear(self) -> None:
        self._clear_items()
