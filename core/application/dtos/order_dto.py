"""Application DTOs for Order operations."""

from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from core.domain.entities import Order


class OrderItemDTO(BaseModel):
    """DTO for order item."""

    product_id: str = Field(..., description="Product id")
    product_name: str = Field(..., description="Product name at order time")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    unit_price: Decimal = Field(..., ge=0, description="Unit price at order time")
    total_price: Decimal = Field(..., ge=0, description="Line total")

    model_config = {"frozen": True}


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    id: str = Field(..., description="Order id")
    order_number: str = Field(..., description="ORD-YYYYMMDD-NNNNNN")
    user_id: str = Field(..., description="Owner user id")
    items: List[OrderItemDTO] = Field(default_factory=list, description="Order items")
    total_amount: Decimal = Field(..., ge=0, description="Total order amount")
    currency: str = Field(default="USD", description="Currency code")
    status: str = Field(..., description="Order status")
    shipping_address: Dict[str, str] = Field(..., description="Shipping address snapshot")
    created_at: Optional[datetime] = Field(None, description="Creation time")

    model_config = {"frozen": True}

    @classmethod
    def from_order(cls, order: Order) -> "OrderDTO":
        return cls(
            id=order.id,
            order_number=str(order.order_number),
            user_id=order.user_id,
            items=[
                OrderItemDTO(
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=line.quantity,
                    unit_price=line.unit_price.amount,
                    total_price=line.line_total.amount,
                )
                for line in order.lines
            ],
            total_amount=order.total.amount,
            currency=order.total.currency,
            status=order.status.value,
            shipping_address=order.shipping_address.to_dict(),
            created_at=order.created_at,
        )


class OrderListDTO(BaseModel):
    """DTO for listing orders."""

    orders: List[OrderDTO] = Field(default_factory=list, description="List of orders")
    total: int = Field(..., ge=0, description="Total count")

    model_config = {"frozen": True}
