"""Keep a projected list in sync with an observable source list."""

from __future__ import annotations

from importlib import metadata

from .adapters import BindingSourceAdapter, ObservableSourceAdapter, SourceAdapter
from .binding import BindingList
from .changes import (
    AddChange,
    CollectionAction,
    CollectionChange,
    MoveChange,
    RemoveChange,
    ReplaceChange,
    ResetChange,
)
from .disposal import Disposable, dispose_items
from .errors import InvalidChangeError, ProjectionError, UnsupportedChangeError
from .list_changes import (
    ItemAdded,
    ItemChanged,
    ItemDeleted,
    ItemMoved,
    ListChange,
    ListChangedType,
    ListReset,
    PropertyDescriptorChanged,
)
from .observable import ObservableList, ObservableSequence
from .projection import ProjectedList, create
from .subscription import Subscription

try:
    __version__ = metadata.version("projected-collections")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "AddChange",
    "BindingList",
    "BindingSourceAdapter",
    "CollectionAction",
    "CollectionChange",
    "Disposable",
    "InvalidChangeError",
    "ItemAdded",
    "ItemChanged",
    "ItemDeleted",
    "ItemMoved",
    "ListChange",
    "ListChangedType",
    "ListReset",
    "MoveChange",
    "ObservableSourceAdapter",
    "ObservableList",
    "ObservableSequence",
    "ProjectedList",
    "ProjectionError",
    "PropertyDescriptorChanged",
    "RemoveChange",
    "ReplaceChange",
    "ResetChange",
    "SourceAdapter",
    "Subscription",
    "UnsupportedChangeError",
    "__version__",
    "create",
    "dispose_items",
]
