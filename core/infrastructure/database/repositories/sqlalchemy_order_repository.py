"""
SQLAlchemy Order Repository Implementation.

Implements OrderRepository on top of one AsyncSession. Commit is left to
the Unit of Work that owns the session.
"""
from typing import List, Optional
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from core.domain.entities import Order, OrderLine
from core.domain.enums import OrderStatus
from core.domain.exceptions import ConflictError
from core.domain.repositories import OrderRepository
from core.domain.value_objects import Money, OrderNumber, ShippingAddress
from core.infrastructure.database.models import OrderItemModel, OrderModel


logger = logging.getLogger(__name__)


class SQLAlchemyOrderRepository(OrderRepository):
    """
    SQLAlchemy implementation of OrderRepository.

    Handles persistence of Order entities through a session.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, order: Order) -> Order:
        """
        Insert a new order and flush it so constraint violations surface here.

        Raises:
            ConflictError: If the order number is already taken
        """
        logger.info(f"Saving order: {order.order_number}")

        self.session.add(self._to_model(order))
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(f"Order number {order.order_number} already exists") from exc

        # Note: Commit is handled by Unit of Work
        return order

    async def find_by_id(self, order_id: str) -> Optional[Order]:
        result = await self.session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.id == order_id)
        )
        model = result.scalar_one_or_none()
        return self._to_domain_entity(model) if model else None

    async def find_by_order_number(self, order_number: str) -> Optional[Order]:
        result = await self.session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.order_number == order_number)
        )
        model = result.scalar_one_or_none()
        return self._to_domain_entity(model) if model else None

    async def find_by_user(self, user_id: str) -> List[Order]:
        result = await self.session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.user_id == user_id)
            .order_by(OrderModel.created_at.desc())
        )
        return [self._to_domain_entity(m) for m in result.scalars().all()]

    # =========================================================================
    # MAPPING
    # =========================================================================

    def _to_model(self, order: Order) -> OrderModel:
        return OrderModel(
            id=order.id,
            order_number=str(order.order_number),
            user_id=order.user_id,
            status=order.status.value,
            total_amount=order.total.amount,
            currency=order.total.currency,
            shipping_address=order.shipping_address.to_dict(),
            created_at=order.created_at,
            items=[
                OrderItemModel(
                    position=position,
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=line.quantity,
                    unit_price=line.unit_price.amount,
                    line_total=line.line_total.amount,
                )
                for position, line in enumerate(order.lines)
            ],
        )

    def _to_domain_entity(self, model: OrderModel) -> Order:
        currency = model.currency
        return Order(
            id=model.id,
            user_id=model.user_id,
            order_number=OrderNumber(model.order_number),
            lines=tuple(
                OrderLine(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity,
                    unit_price=Money(item.unit_price, currency),
                    line_total=Money(item.line_total, currency),
                )
                for item in model.items
            ),
            total=Money(model.total_amount, currency),
            shipping_address=ShippingAddress.from_dict(model.shipping_address),
            status=OrderStatus(model.status),
            created_at=model.created_at,
        )
