from __future__ import annotations

from modalstack.runtime.events import ListenerRegistry


def test_listener_registry_publish_invokes_listeners_in_order() -> None:
    registry: ListenerRegistry[str] = ListenerRegistry()
    seen: list[tuple[str, str]] = []
    registry.add(lambda value: seen.append(("first", value)))
    registry.add(lambda value: seen.append(("second", value)))

    invoked = registry.publish("hello")

    assert invoked == 2
    assert seen == [("first", "hello"), ("second", "hello")]


def test_listener_registry_remove_stops_dispatch() -> None:
    registry: ListenerRegistry[str] = ListenerRegistry()
    seen: list[str] = []
    listener_id = registry.add(seen.append)
    registry.remove(listener_id)
    registry.remove(listener_id)

    assert registry.publish("ignored") == 0
    assert seen == []


def test_listener_registry_removal_during_publish_keeps_round() -> None:
    registry: ListenerRegistry[str] = ListenerRegistry()
    seen: list[str] = []
    ids: list[int] = []
    registry.add(lambda _value: registry.remove(ids[0]))
    ids.append(registry.add(seen.append))

    assert registry.publish("first") == 2
    assert registry.publish("second") == 1
    assert seen == ["first"]
    assert len(registry) == 1


def test_listener_registry_clear() -> None:
    registry: ListenerRegistry[str] = ListenerRegistry()
    registry.add(lambda _value: None)
    registry.clear()
    assert len(registry) == 0
