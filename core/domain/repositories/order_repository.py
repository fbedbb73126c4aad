"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import AsyncContextManager, List, Optional

from ..entities.order import Order


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def add(self, order: Order) -> Order:
        """Persist a new order.

        Args:
            order: Order aggregate to persist

        Returns:
            The persisted order

        Raises:
            ConflictError: If the order number is already taken
        """
        pass

    @abstractmethod
    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order id

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_order_number(self, order_number: str) -> Optional[Order]:
        """Retrieve order by its human-facing number."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: str) -> List[Order]:
        """List a user's orders, newest first."""
        pass


class OrderStore(OrderRepository):
    """
    Store-level access to orders.

    Beyond the repository operations (each running on its own), a store
    reports whether it can run several writes atomically and, if so, opens
    a transaction scope yielding a repository bound to that transaction.
    """

    @abstractmethod
    async def supports_transactions(self) -> bool:
        """Capability check: can transaction() give all-or-nothing writes?"""
        pass

    @abstractmethod
    def transaction(self) -> AsyncContextManager[OrderRepository]:
        """Open a transaction scope.

        Writes made through the yielded repository are committed when the
        block exits cleanly and discarded when it raises.
        """
        pass
