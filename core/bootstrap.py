"""
Process wiring.

Builds the bus, the correlator, the module responders, the stock-update
handler and the order use cases once at process start, and tears them down
at shutdown.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

from core.application.handlers import StockUpdateHandler
from core.application.responders import CartResponder, ProductResponder, UserResponder
from core.application.services import OrderQueryService
from core.application.use_cases import CreateOrderUseCase
from core.domain.repositories import CartRepository, OrderStore, ProductRepository, UserRepository
from core.infrastructure.adapters.persistence.in_memory_catalog import (
    InMemoryCartRepository,
    InMemoryProductRepository,
    InMemoryUserRepository,
)
from core.infrastructure.adapters.persistence.in_memory_order_store import InMemoryOrderStore
from core.infrastructure.database.config import create_engine, get_session_factory, init_database
from core.infrastructure.database.order_store import SQLAlchemyOrderStore
from core.infrastructure.logging import configure_logging, get_logger
from core.settings import AppSettings, get_app_settings
from messaging import InMemoryEventBus, RequestResponseService

logger = get_logger(__name__)


@dataclass
class Container:
    """Everything one process needs, built once."""

    settings: AppSettings
    bus: InMemoryEventBus
    correlator: RequestResponseService
    orders: OrderStore
    products: ProductRepository
    users: UserRepository
    carts: CartRepository
    create_order: CreateOrderUseCase
    order_queries: OrderQueryService
    stock_updates: StockUpdateHandler
    engine: Optional[AsyncEngine] = None

    async def shutdown(self) -> None:
        """Flush background deliveries, release pending requests, dispose the engine."""
        await self.bus.drain()
        await self.correlator.close()
        if self.engine is not None:
            await self.engine.dispose()
        logger.info("✅ Container shut down")


def build_container(
    settings: Optional[AppSettings] = None,
    orders: Optional[OrderStore] = None,
    products: Optional[ProductRepository] = None,
    users: Optional[UserRepository] = None,
    carts: Optional[CartRepository] = None,
) -> Container:
    """
    Wire the process. Stores default to in-memory implementations.

    Args:
        settings: Application settings (cached environment settings if omitted)
        orders: Order store
        products: Product repository shared by the responder and the handler
        users: User repository
        carts: Cart repository
    """
    settings = settings or get_app_settings()
    timeout = settings.messaging.request_timeout_seconds

    bus = InMemoryEventBus()
    correlator = RequestResponseService(bus, default_timeout=timeout)

    orders = orders if orders is not None else InMemoryOrderStore()
    products = products if products is not None else InMemoryProductRepository()
    users = users if users is not None else InMemoryUserRepository()
    carts = carts if carts is not None else InMemoryCartRepository()

    UserResponder(correlator, users).register(bus)
    ProductResponder(correlator, products).register(bus)
    CartResponder(correlator, carts, users).register(bus)

    stock_updates = StockUpdateHandler(products)
    stock_updates.register(bus)

    container = Container(
        settings=settings,
        bus=bus,
        correlator=correlator,
        orders=orders,
        products=products,
        users=users,
        carts=carts,
        create_order=CreateOrderUseCase(correlator, orders, bus, request_timeout=timeout),
        order_queries=OrderQueryService(orders, correlator, request_timeout=timeout),
        stock_updates=stock_updates,
    )
    logger.info(f"Container built (request timeout: {timeout:g}s, order store: {type(orders).__name__})")
    return container


async def start(settings: Optional[AppSettings] = None) -> Container:
    """
    Configure logging, create the database schema and build the container
    around the SQLAlchemy order store.
    """
    settings = settings or get_app_settings()
    configure_logging(settings.logging.level)

    engine = create_engine(settings.database)
    await init_database(engine)
    orders = SQLAlchemyOrderStore(
        get_session_factory(engine),
        transactions_enabled=settings.database.transactions_enabled,
    )
    container = build_container(settings, orders=orders)
    container.engine = engine
    return container
