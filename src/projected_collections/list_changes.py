"""Single-item list-changed descriptors emitted by ``BindingList``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal


class ListChangedType(StrEnum):
    """Kind of change reported by a binding list."""

    RESET = "reset"
    ITEM_ADDED = "item_added"
    ITEM_DELETED = "item_deleted"
    ITEM_MOVED = "item_moved"
    ITEM_CHANGED = "item_changed"
    PROPERTY_DESCRIPTOR_ADDED = "property_descriptor_added"
    PROPERTY_DESCRIPTOR_DELETED = "property_descriptor_deleted"
    PROPERTY_DESCRIPTOR_CHANGED = "property_descriptor_changed"


@dataclass(frozen=True, slots=True, kw_only=True)
class ListReset:
    """The whole list must be re-read."""

    list_changed_type: Literal[ListChangedType.RESET] = ListChangedType.RESET


@dataclass(frozen=True, slots=True, kw_only=True)
class ItemAdded:
    """An item was added at ``new_index``."""

    new_index: int
    list_changed_type: Literal[ListChangedType.ITEM_ADDED] = ListChangedType.ITEM_ADDED


@dataclass(frozen=True, slots=True, kw_only=True)
class ItemDeleted:
    """The item at ``old_index`` was deleted."""

    old_index: int
    list_changed_type: Literal[ListChangedType.ITEM_DELETED] = ListChangedType.ITEM_DELETED


@dataclass(frozen=True, slots=True, kw_only=True)
class ItemMoved:
    """An item moved from ``old_index`` to ``new_index``."""

    new_index: int
    old_index: int
    list_changed_type: Literal[ListChangedType.ITEM_MOVED] = ListChangedType.ITEM_MOVED


@dataclass(frozen=True, slots=True, kw_only=True)
class ItemChanged:
    """The item at ``new_index`` changed in place.

    ``property_name`` names the changed attribute when the emitter knows it.
    """

    new_index: int
    property_name: str | None = None
    list_changed_type: Literal[ListChangedType.ITEM_CHANGED] = ListChangedType.ITEM_CHANGED


type PropertyDescriptorChangeType = Literal[
    ListChangedType.PROPERTY_DESCRIPTOR_ADDED,
    ListChangedType.PROPERTY_DESCRIPTOR_DELETED,
    ListChangedType.PROPERTY_DESCRIPTOR_CHANGED,
]


@dataclass(frozen=True, slots=True, kw_only=True)
class PropertyDescriptorChanged:
    """The item schema changed; the items themselves did not."""

    property_name: str | None = None
    list_changed_type: PropertyDescriptorChangeType = ListChangedType.PROPERTY_DESCRIPTOR_CHANGED

    def __post_init__(self) -> None:
        if self.list_changed_type not in (
            ListChangedType.PROPERTY_DESCRIPTOR_ADDED,
            ListChangedType.PROPERTY_DESCRIPTOR_DELETED,
            ListChangedType.PROPERTY_DESCRIPTOR_CHANGED,
        ):
            raise ValueError(
                f"Property descriptor change cannot carry {self.list_changed_type!r}"
            )


type ListChange = (
    ListReset | ItemAdded | ItemDeleted | ItemMoved | ItemChanged | PropertyDescriptorChanged
)
