"""Domain entities."""

from .cart import Cart, CartLine
from .order import Order, OrderLine
from .product import Product
from .user import User

__all__ = ["Cart", "CartLine", "Order", "OrderLine", "Product", "User"]
