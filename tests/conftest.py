"""Shared fixtures: a wired in-memory process with a small catalog."""

import pytest

from core.bootstrap import build_container
from core.domain.entities import Cart, CartLine, Product
from core.domain.value_objects import Money
from core.infrastructure.adapters.persistence.in_memory_catalog import (
    InMemoryCartRepository,
    InMemoryProductRepository,
    InMemoryUserRepository,
)
from core.infrastructure.adapters.persistence.in_memory_order_store import InMemoryOrderStore
from core.infrastructure.database.config import DatabaseSettings
from core.settings import AppSettings, LoggingSettings, MessagingSettings


SHIPPING_ADDRESS = {
    "street": "123 Main St",
    "city": "New York",
    "state": "NY",
    "postalCode": "10001",
    "country": "United States",
}


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        messaging=MessagingSettings(request_timeout_seconds=1.0),
        database=DatabaseSettings(database_url="sqlite+aiosqlite:///:memory:"),
        logging=LoggingSettings(level="DEBUG"),
    )


@pytest.fixture
def products() -> InMemoryProductRepository:
    return InMemoryProductRepository([
        Product(id="p-keyboard", name="Keyboard", price=Money.of(100), stock=10),
        Product(id="p-mouse", name="Mouse", price=Money.of(25), stock=1),
        Product(id="p-cable", name="Cable", price=Money.of("4.50"), stock=0),
    ])


@pytest.fixture
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def alice(users):
    return users.register("alice@example.com", "Alice")


@pytest.fixture
def carts() -> InMemoryCartRepository:
    return InMemoryCartRepository()


@pytest.fixture
def order_store() -> InMemoryOrderStore:
    return InMemoryOrderStore()


@pytest.fixture
def container(settings, order_store, products, users, carts):
    return build_container(
        settings,
        orders=order_store,
        products=products,
        users=users,
        carts=carts,
    )


async def fill_cart(carts, user_id: str, *lines) -> Cart:
    """Store a cart for user_id made of (product_id, name, quantity, unit_price) tuples."""
    cart = Cart(user_id=user_id)
    for product_id, name, quantity, unit_price in lines:
        cart.add_line(CartLine.priced(product_id, name, quantity, Money.of(unit_price)))
    await carts.save(cart)
    return cart
