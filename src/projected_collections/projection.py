"""Projected lists: read-only sequences mirroring a source through a projection.

A ``ProjectedList`` owns its projected items. It is built from a snapshot of the
source, subscribes to the source's change notifications and replays each change
as the equivalent edits on itself. Items leaving the list (removed, overwritten
or cleared) are disposed once downstream subscribers have seen the change.

The subscription keeps the projected list reachable from the source, so call
``close`` (or use the list as a context manager) when it is no longer needed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

from .adapters import BindingSourceAdapter, ObservableSourceAdapter
from .binding import BindingList
from .changes import RemoveChange, ReplaceChange
from .config import get_projection_config
from .disposal import dispose_items
from .edits import Clear, InsertItems, RemoveAt, ReplaceAt
from .observable import ObservableSequence

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from types import TracebackType

    from .adapters import SourceAdapter
    from .changes import CollectionChange
    from .config import ProjectionConfig
    from .edits import ProjectionEdit
    from .subscription import Subscription

log = logging.getLogger(__name__)


class ProjectedList[T, P](ObservableSequence[P]):
    """Sequence of ``projection(item)`` for every item of a source, kept in sync.

    Downstream observers may ``subscribe`` to the projected list; it reports its
    own changes as ``CollectionChange`` descriptors. It offers no public mutators:
    every change must come from the source.
    """

    def __init__(
        self,
        adapter: SourceAdapter[T],
        projection: Callable[[T], P],
        *,
        config: ProjectionConfig | None = None,
    ) -> None:
        super().__init__(projection(item) for item in adapter.snapshot())
        self._projection = projection
        self._config = config or get_projection_config()
        self._subscription: Subscription | None = adapter.connect(self._apply)
        log.debug("%s connected with %d item(s)", type(self).__name__, len(self))

    @property
    def closed(self) -> bool:
        return self._subscription is None

    def close(self) -> None:
        """Stop following the source. Projected items are left as they are."""

        subscription = self._subscription
        if subscription is None:
            return
        self._subscription = None
        subscription.close()
        log.debug("%s disconnected from source", type(self).__name__)

    def __enter__(self) -> ProjectedList[T, P]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        self.close()
        return False

    def _apply(self, edits: Iterable[ProjectionEdit[T]]) -> None:
        for edit in edits:
            match edit:
                case InsertItems(items=items, index=index):
                    position = len(self._items) if index is None else index
                    self._insert_items(position, [self._projection(item) for item in items])
                case RemoveAt(index=index):
                    self._remove_items(index)
                case ReplaceAt(index=index, item=item):
                    self._set_item(index, self._projection(item))
                case Clear():
                    self._clear_items()
                case _:
                    raise TypeError(f"Unknown projection edit {edit!r}")

    def _clear_items(self) -> None:
        removed = tuple(self._items)
        try:
            super()._clear_items()
        finally:
            self._dispose(removed)

    def _on_collection_changed(self, change: CollectionChange[P]) -> None:
        try:
            super()._on_collection_changed(change)
        finally:
            match change:
                case RemoveChange(old_items=old_items) | ReplaceChange(old_items=old_items):
                    self._dispose(old_items)
                case _:
                    pass

    def _dispose(self, departed: Iterable[P]) -> None:
        if not self._config.dispose_removed:
            return
        # a projection may hand back one object for several source items
        remaining = {id(item) for item in self._items}
        seen: set[int] = set()
        unique: list[P] = []
        for item in departed:
            if id(item) in remaining or id(item) in seen:
                continue
            seen.add(id(item))
            unique.append(item)
        dispose_items(unique)


def create[T, P](
    source: ObservableSequence[T] | BindingList[T] | SourceAdapter[T],
    projection: Callable[[T], P],
    *,
    config: ProjectionConfig | None = None,
) -> ProjectedList[T, P]:
    """Build a projected list following ``source``.

    ``ObservableSequence`` sources (including other projected lists) are
    followed batch by batch; ``BindingList`` sources item by item. A ready-made
    adapter is used as given.
    """

    adapter: SourceAdapter[T]
    match source:
        case ObservableSequence():
            adapter = ObservableSourceAdapter(source)
        case BindingList():
            adapter = BindingSourceAdapter(source)
        case ObservableSourceAdapter() | BindingSourceAdapter():
            adapter = source
        case _:
            raise TypeError(f"Cannot project changes of {type(source).__name__}")
    return ProjectedList(adapter, projection, config=config)
