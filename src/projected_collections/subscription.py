"""Explicit handle for a change-notification subscription."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

log = logging.getLogger(__name__)


class Subscription:
    """Owns the unsubscribe callback of one handler registration.

    ``close`` releases the registration exactly once; later calls do nothing.
    """

    __slots__ = ("_unsubscribe",)

    def __init__(self, unsubscribe: Callable[[], None]) -> None:
        self._unsubscribe: Callable[[], None] | None = unsubscribe

    @property
    def closed(self) -> bool:
        return self._unsubscribe is None

    def close(self) -> None:
        unsubscribe = self._unsubscribe
        if unsubscribe is None:
            return
        self._unsubscribe = None
        unsubscribe()
        log.debug("Subscription released")

    def __enter__(self) -> Subscription:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        self.close()
        return False

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<Subscription {state}>"


class HandlerRegistry[E]:
    """Ordered set of change handlers for one emitter.

    Registering the same callable twice yields two independent subscriptions.
    Handlers added or released during ``notify`` take effect on the next change.
    """

    __slots__ = ("_handlers", "_next_token")

    def __init__(self) -> None:
        self._handlers: dict[int, Callable[[E], None]] = {}
        self._next_token = 0

    def __len__(self) -> int:
        return len(self._handlers)

    def add(self, handler: Callable[[E], None]) -> Subscription:
        token = self._next_token
        self._next_token += 1
        self._handlers[token] = handler

        def release() -> None:
            self._handlers.pop(token, None)

        return Subscription(release)

    def notify(self, change: E) -> None:
        for handler in tuple(self._handlers.values()):
            handler(change)
