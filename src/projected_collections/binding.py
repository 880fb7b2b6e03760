"""Mutable list reporting changes one item at a time."""

from __future__ import annotations

import logging
from collections.abc import MutableSequence
from typing import TYPE_CHECKING, overload

from .list_changes import ItemAdded, ItemChanged, ItemDeleted, ListReset
from .subscription import HandlerRegistry

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from .list_changes import ListChange
    from .subscription import Subscription

log = logging.getLogger(__name__)


class BindingList[T](MutableSequence[T]):
    """List emitting ``ListChange`` descriptors for data-binding consumers.

    Unlike ``ObservableList`` every notification concerns a single position:
    inserts report ``ItemAdded``, deletions ``ItemDeleted`` and assignments
    ``ItemChanged``. ``clear`` and ``reset_bindings`` report ``ListReset``.
    Set ``raise_list_changed_events`` to ``False`` to mutate silently, then call
    ``reset_bindings`` to resynchronise listeners.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._list_changed: HandlerRegistry[ListChange] = HandlerRegistry()
        self.raise_list_changed_events = True

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

    @overload
    def __setitem__(self, index: int, value: T) -> None: ...

    @overload
    def __setitem__(self, index: slice, value: Iterable[T]) -> None: ...

    def __setitem__(self, index: int | slice, value: T | Iterable[T]) -> None:
        if isinstance(index, slice):
            raise TypeError(f"{type(self).__name__} does not support slice assignment")
        position = self._resolve_index(index)
        self._items[position] = value  # type: ignore[assignment]
        self._on_list_changed(ItemChanged(new_index=position))

    def __delitem__(self, index: int | slice) -> None:
        if isinstance(index, slice):
            raise TypeError(f"{type(self).__name__} does not support slice deletion")
        position = self._resolve_index(index)
        del self._items[position]
        self._on_list_changed(ItemDeleted(old_index=position))

    def insert(self, index: int, value: T) -> None:
        size = len(self._items)
        position = max(0, size + index) if index < 0 else min(index, size)
        self._items.insert(position, value)
        self._on_list_changed(ItemAdded(new_index=position))

    def clear(self) -> None:
        self._items.clear()
        self._on_list_changed(ListReset())

    def subscribe(self, handler: Callable[[ListChange], None]) -> Subscription:
        """Register ``handler`` for every subsequent list change."""

        return self._list_changed.add(handler)

    def reset_bindings(self) -> None:
        """Tell listeners to re-read the entire list."""

        self._on_list_changed(ListReset())

    def reset_item(self, index: int) -> None:
        """Tell listeners that the item at ``index`` changed in place."""

        self._on_list_changed(ItemChanged(new_index=self._resolve_index(index)))

    def _resolve_index(self, index: int) -> int:
        size = len(self._items)
        resolved = index + size if index < 0 else index
        if not 0 <= resolved < size:
            raise IndexError(f"{type(self).__name__} index {index} out of range")
        return resolved

    def _on_list_changed(self, change: ListChange) -> None:
        if not self.raise_list_changed_events:
            return
        log.debug("%s %s", type(self).__name__, change.list_changed_type)
        self._list_changed.notify(change)
