"""Domain value objects."""

from .money import Money
from .order_number import OrderNumber
from .shipping_address import ShippingAddress

__all__ = [
    "Money",
    "OrderNumber",
    "ShippingAddress",
]
