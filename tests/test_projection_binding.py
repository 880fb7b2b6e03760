from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from projected_collections import (
    BindingList,
    BindingSourceAdapter,
    InvalidChangeError,
    ItemMoved,
    ListChangedType,
    PropertyDescriptorChanged,
    ProjectedList,
    UnsupportedChangeError,
    create,
)

if TYPE_CHECKING:
    from tests.conftest import ManualSource, RecordingProjection


def _values(projected: ProjectedList[int, object]) -> list[str]:
    return [item.value for item in projected]  # type: ignore[attr-defined]


def test_construction_projects_binding_list(projection: RecordingProjection) -> None:
    projected = create(BindingList([1, 2, 3]), projection)

    assert _values(projected) == ["v1", "v2", "v3"]


def test_deleted_item_is_removed_at_its_index(projection: RecordingProjection) -> None:
    source = BindingList([1, 2, 3])
    projected = create(source, projection)

    del source[0]

    assert _values(projected) == ["v2", "v3"]
    assert projection.disposed() == ["v1"]


def test_added_item_is_projected_and_appended(projection: RecordingProjection) -> None:
    source = BindingList([1, 2])
    projected = create(source, projection)

    source.append(3)

    assert _values(projected) == ["v1", "v2", "v3"]
    assert projection.calls == [1, 2, 3]


def test_inserted_item_is_appended_not_inserted(projection: RecordingProjection) -> None:
    source = BindingList([1, 2])
    projected = create(source, projection)

    source.insert(0, 0)

    assert _values(projected) == ["v1", "v2", "v0"]


def test_reset_repopulates_from_current_source(projection: RecordingProjection) -> None:
    source = BindingList([1, 2])
    projected = create(source, projection)

    source.raise_list_changed_events = False
    source.append(3)
    source[0] = 7
    source.raise_list_changed_events = True
    source.reset_bindings()

    assert _values(projected) == [f"v{item}" for item in source]
    assert sorted(projection.disposed()) == ["v1", "v2"]


def test_clear_leaves_projection_empty(projection: RecordingProjection) -> None:
    source = BindingList([1, 2])
    projected = create(source, projection)

    source.clear()

    assert len(projected) == 0
    assert sorted(projection.disposed()) == ["v1", "v2"]


def test_item_changed_is_ignored(projection: RecordingProjection) -> None:
    source = BindingList([1, 2])
    projected = create(source, projection)

    source[0] = 5
    source.reset_item(1)

    assert _values(projected) == ["v1", "v2"]
    assert projection.calls == [1, 2]


@pytest.mark.parametrize(
    "list_changed_type",
    [
        ListChangedType.PROPERTY_DESCRIPTOR_ADDED,
        ListChangedType.PROPERTY_DESCRIPTOR_DELETED,
        ListChangedType.PROPERTY_DESCRIPTOR_CHANGED,
    ],
)
def test_property_descriptor_changes_are_ignored(
    manual_source: ManualSource[int],
    projection: RecordingProjection,
    list_changed_type: ListChangedType,
) -> None:
    projected = create(BindingSourceAdapter(manual_source), projection)

    manual_source.emit(
        PropertyDescriptorChanged(property_name="name", list_changed_type=list_changed_type)  # type: ignore[arg-type]
    )

    assert _values(projected) == ["v1", "v2", "v3"]


def test_moved_item_is_not_implemented(
    manual_source: ManualSource[int], projection: RecordingProjection
) -> None:
    projected = create(BindingSourceAdapter(manual_source), projection)

    with pytest.raises(UnsupportedChangeError, match="not implemented"):
        manual_source.emit(ItemMoved(new_index=0, old_index=2))

    assert isinstance(UnsupportedChangeError("x"), NotImplementedError)
    assert _values(projected) == ["v1", "v2", "v3"]


def test_unknown_list_change_is_invalid(
    manual_source: ManualSource[int], projection: RecordingProjection
) -> None:
    create(BindingSourceAdapter(manual_source), projection)

    with pytest.raises(InvalidChangeError):
        manual_source.emit(object())


def test_invariant_holds_for_appends_and_deletes() -> None:
    source = BindingList(["a", "b", "c"])
    projected = create(source, str.upper)

    source.append("d")
    del source[1]
    source.extend(["e", "f"])
    source.pop(0)
    source.remove("e")

    assert list(projected) == [item.upper() for item in source]


def test_close_unsubscribes_from_binding_list(projection: RecordingProjection) -> None:
    source = BindingList([1])
    projected = create(source, projection)

    projected.close()
    source.append(2)
    source.clear()

    assert _values(projected) == ["v1"]
    assert projection.disposed() == []
