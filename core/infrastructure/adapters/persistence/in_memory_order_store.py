"""
In-Memory Order Store Implementation.

Used by tests and by the default process wiring.
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, List, Optional

from core.domain.entities.order import Order
from core.domain.exceptions import ConflictError
from core.domain.repositories.order_repository import OrderRepository, OrderStore


logger = logging.getLogger(__name__)


class _StagedOrderRepository(OrderRepository):
    """Repository view inside a transaction: writes are buffered until commit."""

    def __init__(self, store: "InMemoryOrderStore"):
        self._store = store
        self.staged: Dict[str, Order] = {}

    async def add(self, order: Order) -> Order:
        number = str(order.order_number)
        if number in self._store._by_number or any(
            str(o.order_number) == number for o in self.staged.values()
        ):
            raise ConflictError(f"Order number {number} already exists")
        self.staged[order.id] = order
        return order

    async def find_by_id(self, order_id: str) -> Optional[Order]:
        return self.staged.get(order_id) or await self._store.find_by_id(order_id)

    async def find_by_order_number(self, order_number: str) -> Optional[Order]:
        for order in self.staged.values():
            if str(order.order_number) == order_number:
                return order
        return await self._store.find_by_order_number(order_number)

    async def find_by_user(self, user_id: str) -> List[Order]:
        staged = [o for o in self.staged.values() if o.user_id == user_id]
        committed = await self._store.find_by_user(user_id)
        return sorted(staged + committed, key=lambda o: o.created_at, reverse=True)


class InMemoryOrderStore(OrderStore):
    """
    In-memory implementation of OrderStore.

    With transactional=False the capability check reports no transaction
    support, like a standalone document database. With transactional=True
    writes made inside transaction() are staged and only become visible
    when the block exits without error.
    """

    def __init__(self, transactional: bool = False):
        """Initialize empty storage."""
        self._storage: Dict[str, Order] = {}
        self._by_number: Dict[str, str] = {}
        self._transactional = transactional
        self._commit_lock = asyncio.Lock()
        logger.info(
            f"InMemoryOrderStore initialized (transactional: {transactional})"
        )

    async def supports_transactions(self) -> bool:
        return self._transactional

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[OrderRepository]:
        if not self._transactional:
            raise RuntimeError("InMemoryOrderStore was created without transaction support")

        staged = _StagedOrderRepository(self)
        try:
            yield staged
        except BaseException:
            logger.warning(f"Transaction rolled back ({len(staged.staged)} staged order(s) discarded)")
            raise

        async with self._commit_lock:
            for order in staged.staged.values():
                self._insert(order)
        logger.info(f"✅ Transaction committed ({len(staged.staged)} order(s))")

    async def add(self, order: Order) -> Order:
        """
        Save order to in-memory storage.

        Args:
            order: Order entity to save

        Raises:
            ConflictError: If the order number is already stored
        """
        self._insert(order)
        logger.info(
            f"✅ Order saved to in-memory store: {order.order_number} "
            f"(id: {order.id}, status: {order.status.value})"
        )
        return order

    async def find_by_id(self, order_id: str) -> Optional[Order]:
        return self._storage.get(order_id)

    async def find_by_order_number(self, order_number: str) -> Optional[Order]:
        order_id = self._by_number.get(order_number)
        return self._storage.get(order_id) if order_id else None

    async def find_by_user(self, user_id: str) -> List[Order]:
        orders = [o for o in self._storage.values() if o.user_id == user_id]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def count(self) -> int:
        """Get total order count."""
        return len(self._storage)

    def clear(self) -> None:
        """Clear all orders."""
        self._storage.clear()
        self._by_number.clear()
        logger.info("In-memory order store cleared")

    def _insert(self, order: Order) -> None:
        number = str(order.order_number)
        if number in self._by_number:
            raise ConflictError(f"Order number {number} already exists")
        self._storage[order.id] = order
        self._by_number[number] = order.id
