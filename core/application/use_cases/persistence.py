"""
Order persistence strategies.

The order write runs either inside a store transaction (Atomic) or as a
plain write (BestEffort). The strategy is picked once per order-creation
attempt from the store's capability check; everything around the write is
identical in both modes.
"""
import logging
from abc import ABC, abstractmethod

from core.domain.entities import Order
from core.domain.enums import PersistenceMode
from core.domain.exceptions import ConflictError
from core.domain.repositories import OrderRepository, OrderStore


logger = logging.getLogger(__name__)


async def _insert(repository: OrderRepository, order: Order) -> Order:
    if await repository.find_by_order_number(str(order.order_number)) is not None:
        raise ConflictError(f"Order number {order.order_number} already exists")
    return await repository.add(order)


class PersistenceStrategy(ABC):
    mode: PersistenceMode

    def __init__(self, store: OrderStore):
        self._store = store

    @abstractmethod
    async def persist(self, order: Order) -> Order:
        """Write the order.

        Raises:
            ConflictError: If the order number is already taken
        """


class AtomicPersistence(PersistenceStrategy):
    """Duplicate check and insert run in one store transaction."""

    mode = PersistenceMode.ATOMIC

    async def persist(self, order: Order) -> Order:
        async with self._store.transaction() as repository:
            return await _insert(repository, order)


class BestEffortPersistence(PersistenceStrategy):
    """Duplicate check and insert run as separate, non-atomic store calls."""

    mode = PersistenceMode.BEST_EFFORT

    async def persist(self, order: Order) -> Order:
        return await _insert(self._store, order)


async def select_persistence(store: OrderStore) -> PersistenceStrategy:
    """Ask the store about transactions and return the strategy for this attempt."""
    if await store.supports_transactions():
        return AtomicPersistence(store)

    logger.warning("Order store has no transaction support, running without transactions")
    return BestEffortPersistence(store)
