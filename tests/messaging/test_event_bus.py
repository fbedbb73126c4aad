"""Tests for the in-memory event bus."""

import asyncio

import pytest

from messaging import Event, InMemoryEventBus, Topic


@pytest.mark.asyncio
async def test_publish_and_subscribe():
    """Test basic publish/subscribe."""
    bus = InMemoryEventBus()
    received = []

    async def handler(event: Event) -> None:
        received.append(event)

    bus.subscribe("test.event", handler)
    event = Event.create("test.event", {"key": "value"}, source="test")
    await bus.publish(event)

    assert len(received) == 1
    assert received[0].name == "test.event"
    assert received[0].payload == {"key": "value"}


@pytest.mark.asyncio
async def test_multiple_subscribers_run_in_registration_order():
    bus = InMemoryEventBus()
    calls = []

    async def first(event: Event) -> None:
        calls.append("first")

    async def second(event: Event) -> None:
        calls.append("second")

    bus.subscribe(Topic.ORDER_CREATED, first)
    bus.subscribe(Topic.ORDER_CREATED, second)
    await bus.publish(Event.create(Topic.ORDER_CREATED, {}, source="test"))

    assert calls == ["first", "second"]


@pytest.mark.asyncio
async def test_enum_and_string_topics_are_the_same_channel():
    bus = InMemoryEventBus()
    received = []

    async def handler(event: Event) -> None:
        received.append(event.name)

    bus.subscribe(Topic.ORDER_CREATED, handler)
    await bus.publish(Event.create("order.created", {}, source="test"))

    assert received == ["order.created"]
    assert bus.has_subscribers("order.created")


@pytest.mark.asyncio
async def test_failing_handler_does_not_stop_others(caplog):
    bus = InMemoryEventBus()
    received = []

    async def broken(event: Event) -> None:
        raise RuntimeError("boom")

    async def healthy(event: Event) -> None:
        received.append(event)

    bus.subscribe("test.event", broken)
    bus.subscribe("test.event", healthy)
    await bus.publish(Event.create("test.event", {}, source="test"))

    assert len(received) == 1
    assert "boom" in caplog.text


@pytest.mark.asyncio
async def test_publish_without_subscribers_is_a_no_op():
    bus = InMemoryEventBus()
    await bus.publish(Event.create("nobody.listens", {"x": 1}, source="test"))
    assert not bus.has_subscribers("nobody.listens")


@pytest.mark.asyncio
async def test_unsubscribe():
    bus = InMemoryEventBus()
    received = []

    async def handler(event: Event) -> None:
        received.append(event)

    bus.subscribe("test.event", handler)
    bus.unsubscribe("test.event", handler)
    bus.unsubscribe("test.event", handler)
    await bus.publish(Event.create("test.event", {}, source="test"))

    assert received == []


@pytest.mark.asyncio
async def test_publish_nowait_returns_before_handlers_run():
    bus = InMemoryEventBus()
    started = asyncio.Event()
    release = asyncio.Event()
    finished = []

    async def slow(event: Event) -> None:
        started.set()
        await release.wait()
        finished.append(event.name)

    bus.subscribe("slow.event", slow)
    bus.publish_nowait(Event.create("slow.event", {}, source="test"))

    assert finished == []
    assert bus.pending_deliveries == 1

    await started.wait()
    release.set()
    await bus.drain()

    assert finished == ["slow.event"]
    assert bus.pending_deliveries == 0


def test_event_payload_is_copied():
    payload = {"a": 1}
    event = Event.create("test.event", payload, source="test")
    payload["a"] = 2

    assert event.payload == {"a": 1}
    assert event.with_payload(b=2).payload == {"a": 1, "b": 2}
    assert event.payload == {"a": 1}
