from __future__ import annotations

from projected_collections.subscription import HandlerRegistry, Subscription


def test_close_runs_unsubscribe_once() -> None:
    calls: list[str] = []
    subscription = Subscription(lambda: calls.append("released"))

    subscription.close()
    subscription.close()

    assert calls == ["released"]
    assert subscription.closed
    assert repr(subscription) == "<Subscription closed>"


def test_context_manager_closes_subscription() -> None:
    calls: list[str] = []

    with Subscription(lambda: calls.append("released")) as subscription:
        assert not subscription.closed

    assert calls == ["released"]


def test_registry_notifies_in_subscription_order() -> None:
    registry: HandlerRegistry[int] = HandlerRegistry()
    seen: list[tuple[str, int]] = []
    registry.add(lambda change: seen.append(("first", change)))
    registry.add(lambda change: seen.append(("second", change)))

    registry.notify(1)

    assert seen == [("first", 1), ("second", 1)]


def test_handler_released_during_notify_still_sees_current_change() -> None:
    registry: HandlerRegistry[int] = HandlerRegistry()
    seen: list[int] = []
    later = Subscription(lambda: None)

    def release_other(_change: int) -> None:
        later.close()

    registry.add(release_other)
    later = registry.add(seen.append)

    registry.notify(1)
    registry.notify(2)

    assert seen == [1]
    assert len(registry) == 1
