"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Tuple

from ..enums import OrderStatus
from ..exceptions import EmptyCartError
from ..value_objects import Money, OrderNumber, ShippingAddress
from .cart import Cart


@dataclass(frozen=True)
class OrderLine:
    """
    Line item within an order.

    Product name and price are copied from the cart when the order is
    placed, so later catalog changes never alter a placed order.
    """
    product_id: str
    product_name: str
    quantity: int
    unit_price: Money
    line_total: Money


@dataclass
class Order:
    """
    Order aggregate root.

    Lines are a tuple of frozen OrderLine values: the snapshot cannot be
    edited after placement.
    """
    user_id: str
    order_number: OrderNumber
    lines: Tuple[OrderLine, ...]
    total: Money
    shipping_address: ShippingAddress
    status: OrderStatus = OrderStatus.PENDING
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def place(
        cls,
        user_id: str,
        cart: Cart,
        shipping_address: ShippingAddress,
        order_number: Optional[OrderNumber] = None,
        now: Optional[datetime] = None,
    ) -> "Order":
        """
        Snapshot a cart into a new pending order.

        Raises:
            EmptyCartError: If the cart has no lines
        """
        if cart.is_empty():
            raise EmptyCartError()

        now = now or datetime.now(timezone.utc)
        lines = tuple(
            OrderLine(
                product_id=line.product_id,
                product_name=line.product_name,
                quantity=line.quantity,
                unit_price=line.unit_price,
                line_total=line.line_total,
            )
            for line in cart.lines
        )
        return cls(
            user_id=user_id,
            order_number=order_number or OrderNumber.generate(now),
            lines=lines,
            total=cart.total,
            shipping_address=shipping_address,
            status=OrderStatus.PENDING,
            created_at=now,
        )

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING
