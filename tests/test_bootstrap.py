"""Tests for process wiring."""

import logging

import pytest

from core.bootstrap import build_container, start
from core.application.use_cases import CreateOrderRequest
from core.domain.exceptions import InsufficientStockError, MessagingError
from core.infrastructure.database.config import DatabaseSettings
from core.infrastructure.database.order_store import SQLAlchemyOrderStore
from core.infrastructure.logging import configure_logging
from core.settings import AppSettings, LoggingSettings, MessagingSettings
from messaging import Topic
from tests.conftest import SHIPPING_ADDRESS, fill_cart


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield
    root.setLevel(level)
    root.handlers[:] = handlers


def test_build_container_registers_modules(container):
    for topic in (
        Topic.USER_LOOKUP_REQUEST,
        Topic.PRODUCT_LOOKUP_REQUEST,
        Topic.STOCK_VALIDATION_REQUEST,
        Topic.CART_LOOKUP_REQUEST,
        Topic.CART_CLEAR_REQUEST,
        Topic.ORDER_CREATED,
    ):
        assert container.bus.has_subscribers(topic)


def test_build_container_defaults_to_in_memory_stores(settings):
    container = build_container(settings)

    assert type(container.orders).__name__ == "InMemoryOrderStore"
    assert container.correlator.in_flight_count == 0


@pytest.mark.asyncio
async def test_shutdown_closes_correlator(container):
    await container.shutdown()

    assert container.correlator.closed
    with pytest.raises(MessagingError):
        await container.create_order.execute(
            CreateOrderRequest(user_email="alice@example.com", shipping_address=SHIPPING_ADDRESS)
        )


@pytest.mark.asyncio
async def test_start_uses_database_store(tmp_path):
    settings = AppSettings(
        messaging=MessagingSettings(request_timeout_seconds=1.0),
        database=DatabaseSettings(database_url=f"sqlite+aiosqlite:///{tmp_path}/shop.db"),
        logging=LoggingSettings(level="WARNING"),
    )

    container = await start(settings)
    try:
        assert isinstance(container.orders, SQLAlchemyOrderStore)
        assert await container.orders.supports_transactions()

        alice = container.users.register("alice@example.com", "Alice")
        await fill_cart(container.carts, alice.id, ("p-none", "Ghost", 1, 1))
        with pytest.raises(InsufficientStockError, match="Product p-none not found"):
            await container.create_order.execute(
                CreateOrderRequest(user_email=alice.email, shipping_address=SHIPPING_ADDRESS)
            )
    finally:
        await container.shutdown()


def test_configure_logging_installs_one_handler():
    root = logging.getLogger()
    configure_logging("DEBUG")
    configure_logging("INFO")

    marked = [h for h in root.handlers if getattr(h, "_shopmesh", False)]
    assert len(marked) == 1
    assert root.level == logging.INFO
