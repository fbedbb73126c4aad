"""
Unit of Work.

One session, one transaction. Repositories handed out by the unit share
that session and nothing reaches the database until commit().
"""
from typing import Optional
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.exceptions import ConflictError
from core.infrastructure.database.repositories import SQLAlchemyOrderRepository


logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Opens a session on enter and closes it on exit.

    Usage:
        async with UnitOfWork(session_factory) as uow:
            await uow.orders.add(order)
            await uow.commit()

    Leaving the block without commit(), or with an exception, rolls back.
    """

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory
        self.session: Optional[AsyncSession] = None
        self.orders: Optional[SQLAlchemyOrderRepository] = None
        self._committed = False

    async def __aenter__(self) -> "UnitOfWork":
        self.session = self._session_factory()
        self.orders = SQLAlchemyOrderRepository(self.session)
        self._committed = False
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is not None:
                logger.warning(f"Unit of work aborted ({exc_type.__name__}: {exc_val}), rolling back")
                await self.session.rollback()
            elif not self._committed:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self.orders = None

    async def commit(self) -> None:
        """
        Commit everything done through this unit.

        Raises:
            ConflictError: If a unique constraint fails at commit time
        """
        try:
            await self.session.commit()
        except IntegrityError as exc:
            logger.error(f"❌ Commit failed: {exc.orig or exc}")
            await self.session.rollback()
            raise ConflictError(str(exc.orig) if exc.orig else str(exc)) from exc

        self._committed = True
        logger.debug("✅ Unit of work committed")
