"""Optional disposal capability of projected items."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

log = logging.getLogger(__name__)


@runtime_checkable
class Disposable(Protocol):
    """Anything holding resources that must be released explicitly."""

    def dispose(self) -> None: ...


def dispose_items(items: Iterable[object]) -> int:
    """Dispose every item that supports it and return how many were disposed.

    Items without a ``dispose`` method are skipped. Exceptions raised by an
    item's ``dispose`` propagate and leave the remaining items untouched.
    """

    disposed = 0
    for item in items:
        if isinstance(item, Disposable):
            item.dispose()
            disposed += 1
    if disposed:
        log.debug("Disposed %d projected item(s)", disposed)
    return disposed
