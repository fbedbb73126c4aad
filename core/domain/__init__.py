"""Domain layer - pure domain models and interfaces."""

from .entities import Cart, CartLine, Order, OrderLine, Product, User
from .enums import OrderStatus
from .value_objects import Money, OrderNumber, ShippingAddress

__all__ = [
    "Cart",
    "CartLine",
    "Money",
    "Order",
    "OrderLine",
    "OrderNumber",
    "OrderStatus",
    "Product",
    "ShippingAddress",
    "User",
]
