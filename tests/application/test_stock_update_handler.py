"""Tests for the stock-update handler."""

import pytest

from core.application.handlers import StockUpdateHandler
from core.domain.events import OrderCreatedEvent, OrderCreatedItem
from core.domain.value_objects import Money
from core.infrastructure.adapters.persistence.in_memory_catalog import InMemoryProductRepository
from messaging import Event, InMemoryEventBus, Topic


def order_created(*items) -> OrderCreatedEvent:
    return OrderCreatedEvent(
        order_id="order-1",
        user_id="user-1",
        order_number="ORD-20241224-123456",
        items=tuple(
            OrderCreatedItem(product_id=product_id, quantity=quantity, unit_price=Money.of(1))
            for product_id, quantity in items
        ),
        total_amount=Money.of(1),
    )


@pytest.mark.asyncio
async def test_decrements_every_line(products):
    handler = StockUpdateHandler(products)

    report = await handler.process(order_created(("p-keyboard", 3), ("p-mouse", 1)))

    assert report.ok
    assert report.decremented == [("p-keyboard", 3), ("p-mouse", 1)]
    assert products.stock_of("p-keyboard") == 7
    assert products.stock_of("p-mouse") == 0


@pytest.mark.asyncio
async def test_missing_product_is_skipped(products, caplog):
    handler = StockUpdateHandler(products)

    report = await handler.process(order_created(("p-gone", 1), ("p-keyboard", 1)))

    assert report.skipped == ["p-gone"]
    assert report.decremented == [("p-keyboard", 1)]
    assert not report.ok
    assert "p-gone not found" in caplog.text


@pytest.mark.asyncio
async def test_insufficient_stock_is_logged_and_next_line_processed(products, caplog):
    handler = StockUpdateHandler(products)

    report = await handler.process(order_created(("p-mouse", 2), ("p-keyboard", 1)))

    assert report.failed == ["Insufficient stock for Mouse. Available: 1, Requested: 2"]
    assert products.stock_of("p-mouse") == 1
    assert products.stock_of("p-keyboard") == 9
    assert "Stock not updated" in caplog.text


@pytest.mark.asyncio
async def test_storage_error_does_not_stop_other_lines(products):
    class FlakyProducts(InMemoryProductRepository):
        async def save(self, product) -> None:
            if product.id == "p-keyboard":
                raise IOError("disk full")
            await super().save(product)

    flaky = FlakyProducts([await products.find_by_id("p-keyboard"), await products.find_by_id("p-mouse")])
    handler = StockUpdateHandler(flaky)

    report = await handler.process(order_created(("p-keyboard", 1), ("p-mouse", 1)))

    assert report.failed == ["p-keyboard: disk full"]
    assert report.decremented == [("p-mouse", 1)]


@pytest.mark.asyncio
async def test_duplicate_delivery_decrements_twice(products):
    """Delivery is not deduplicated; each order.created message counts."""
    bus = InMemoryEventBus()
    StockUpdateHandler(products).register(bus)
    event = Event.create(Topic.ORDER_CREATED, order_created(("p-keyboard", 2)).to_payload(), source="test")

    await bus.publish(event)
    await bus.publish(event)

    assert products.stock_of("p-keyboard") == 6


@pytest.mark.asyncio
async def test_malformed_payload_is_ignored(products, caplog):
    bus = InMemoryEventBus()
    StockUpdateHandler(products).register(bus)

    await bus.publish(Event.create(Topic.ORDER_CREATED, {"items": []}, source="test"))

    assert "Malformed" in caplog.text
    assert products.stock_of("p-keyboard") == 10
