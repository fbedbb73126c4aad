"""
SQLAlchemy-backed OrderStore.

Each repository call outside transaction() runs in its own Unit of Work
and commits immediately. transaction() hands out a repository bound to one
Unit of Work that commits on clean exit.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from core.domain.entities import Order
from core.domain.repositories import OrderRepository, OrderStore
from core.infrastructure.database.unit_of_work import UnitOfWork


logger = logging.getLogger(__name__)


class SQLAlchemyOrderStore(OrderStore):
    """OrderStore over an async SQLAlchemy session factory."""

    def __init__(self, session_factory: async_sessionmaker, transactions_enabled: bool = True):
        """
        Args:
            session_factory: Factory producing AsyncSession objects
            transactions_enabled: Configuration switch; False forces best-effort mode
        """
        self._session_factory = session_factory
        self._transactions_enabled = transactions_enabled

    async def supports_transactions(self) -> bool:
        """
        Check the backend by opening a transaction and running SELECT 1.

        Returns:
            False when disabled by configuration or when the check fails
        """
        if not self._transactions_enabled:
            return False

        try:
            async with self._session_factory() as session:
                async with session.begin():
                    await session.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.warning(f"Transaction support check failed: {exc}")
            return False
        return True

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[OrderRepository]:
        async with UnitOfWork(self._session_factory) as uow:
            yield uow.orders
            await uow.commit()

    async def add(self, order: Order) -> Order:
        async with UnitOfWork(self._session_factory) as uow:
            await uow.orders.add(order)
            await uow.commit()
        return order

    async def find_by_id(self, order_id: str) -> Optional[Order]:
        async with UnitOfWork(self._session_factory) as uow:
            return await uow.orders.find_by_id(order_id)

    async def find_by_order_number(self, order_number: str) -> Optional[Order]:
        async with UnitOfWork(self._session_factory) as uow:
            return await uow.orders.find_by_order_number(order_number)

    async def find_by_user(self, user_id: str) -> List[Order]:
        async with UnitOfWork(self._session_factory) as uow:
            return await uow.orders.find_by_user(user_id)
