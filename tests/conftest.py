from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pytest

from projected_collections.subscription import HandlerRegistry

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from projected_collections.subscription import Subscription


@dataclass(eq=False)
class DisposableValue:
    value: str
    dispose_calls: int = 0

    def dispose(self) -> None:
        self.dispose_calls += 1


@dataclass
class RecordingProjection:
    """Projection ``x -> DisposableValue("v<x>")`` remembering every call."""

    calls: list[object] = field(default_factory=list["object"])
    created: list[DisposableValue] = field(default_factory=list["DisposableValue"])

    def __call__(self, item: object) -> DisposableValue:
        self.calls.append(item)
        value = DisposableValue(f"v{item}")
        self.created.append(value)
        return value

    def disposed(self) -> list[str]:
        return [value.value for value in self.created if value.dispose_calls]


class ManualSource[T]:
    """Source that emits whatever descriptor a test hands it."""

    def __init__(self, items: list[T]) -> None:
        self.items = items
        self._handlers: HandlerRegistry[object] = HandlerRegistry()

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    def subscribe(self, handler: Callable[[object], None]) -> Subscription:
        return self._handlers.add(handler)

    def emit(self, change: object) -> None:
        self._handlers.notify(change)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PROJECTED_COLLECTIONS_DISPOSE_REMOVED", raising=False)
    monkeypatch.delenv("PROJECTED_COLLECTIONS_LOG_LEVEL", raising=False)


@pytest.fixture
def projection() -> RecordingProjection:
    return RecordingProjection()


@pytest.fixture
def manual_source() -> ManualSource[int]:
    return ManualSource([1, 2, 3])
