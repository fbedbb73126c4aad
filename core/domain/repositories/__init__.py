"""Repository interfaces."""
from .catalog_repository import CartRepository, ProductRepository, UserRepository
from .order_repository import OrderRepository, OrderStore

__all__ = [
    "CartRepository",
    "OrderRepository",
    "OrderStore",
    "ProductRepository",
    "UserRepository",
]
