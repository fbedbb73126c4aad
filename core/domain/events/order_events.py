"""
Order Domain Events.

`order.created` is a fire-and-forget broadcast: no reply is expected.
Consumers: Stock-Update Reactor.
"""
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from ..entities import Order
from ..value_objects import Money
from .base import MessageContract, amount_of, money_from


@dataclass(frozen=True)
class OrderCreatedItem:
    product_id: str
    quantity: int
    unit_price: Money

    def to_payload(self) -> Dict[str, Any]:
        return {
            "productId": self.product_id,
            "quantity": self.quantity,
            "unitPrice": amount_of(self.unit_price),
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "OrderCreatedItem":
        return cls(
            product_id=str(payload["productId"]),
            quantity=int(payload["quantity"]),
            unit_price=money_from(payload.get("unitPrice")),
        )


@dataclass(frozen=True)
class OrderCreatedEvent(MessageContract):
    """
    Order was persisted.

    Trigger: CreateOrderUseCase after the order write
    Consumers: StockUpdateHandler
    """
    order_id: str
    user_id: str
    order_number: str
    items: Tuple[OrderCreatedItem, ...]
    total_amount: Money

    @classmethod
    def from_order(cls, order: Order) -> "OrderCreatedEvent":
        return cls(
            order_id=order.id,
            user_id=order.user_id,
            order_number=str(order.order_number),
            items=tuple(
                OrderCreatedItem(
                    product_id=line.product_id,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                )
                for line in order.lines
            ),
            total_amount=order.total,
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            "orderId": self.order_id,
            "userId": self.user_id,
            "orderNumber": self.order_number,
            "items": [item.to_payload() for item in self.items],
            "totalAmount": amount_of(self.total_amount),
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "OrderCreatedEvent":
        return cls(
            order_id=str(payload["orderId"]),
            user_id=str(payload["userId"]),
            order_number=str(payload["orderNumber"]),
            items=tuple(OrderCreatedItem.from_payload(i) for i in payload.get("items") or []),
            total_amount=money_from(payload.get("totalAmount")),
        )
