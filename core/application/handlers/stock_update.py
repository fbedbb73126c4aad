"""
Stock-update handler.

Reacts to the order.created broadcast by decrementing stock for every line.
The order is already committed when this runs, so nothing here raises back
to the publisher: a missing product, short stock or a storage error is
logged and the next line is processed.

Not idempotent: delivering the same order.created twice decrements twice.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from core.domain.events import OrderCreatedEvent
from core.domain.repositories import ProductRepository
from messaging import Event, EventBusProtocol, Topic


logger = logging.getLogger(__name__)


@dataclass
class StockUpdateReport:
    """What happened to each line of one order.created message."""
    order_id: str
    decremented: List[Tuple[str, int]] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.skipped and not self.failed


class StockUpdateHandler:
    """Subscribes to order.created and decrements product stock."""

    def __init__(self, product_repository: ProductRepository):
        self.products = product_repository

    def register(self, bus: EventBusProtocol) -> None:
        bus.subscribe(Topic.ORDER_CREATED, self.handle)

    async def handle(self, event: Event) -> None:
        """Bus entry point. Never raises."""
        try:
            message = OrderCreatedEvent.from_payload(event.payload)
        except (KeyError, TypeError, ValueError) as exc:
            logger.error(f"Malformed {event.name} payload ignored: {exc}")
            return
        await self.process(message)

    async def process(self, message: OrderCreatedEvent) -> StockUpdateReport:
        report = StockUpdateReport(order_id=message.order_id)

        for item in message.items:
            try:
                product = await self.products.find_by_id(item.product_id)
                if product is None:
                    logger.warning(
                        f"Product {item.product_id} not found while updating stock "
                        f"for order {message.order_number}, skipped"
                    )
                    report.skipped.append(item.product_id)
                    continue

                if not product.has_stock(item.quantity):
                    reason = (
                        f"Insufficient stock for {product.name}. "
                        f"Available: {product.stock}, Requested: {item.quantity}"
                    )
                    logger.error(f"Stock not updated for order {message.order_number}: {reason}")
                    report.failed.append(reason)
                    continue

                product.decrement_stock(item.quantity)
                await self.products.save(product)
                report.decremented.append((product.id, item.quantity))
                logger.info(
                    f"Stock updated for {product.id}: -{item.quantity} "
                    f"(remaining: {product.stock})"
                )
            except Exception as exc:
                logger.error(
                    f"Stock update failed for product {item.product_id} "
                    f"(order {message.order_number}): {exc}",
                    exc_info=True,
                )
                report.failed.append(f"{item.product_id}: {exc}")

        return report
