"""In-memory stores."""
from .in_memory_catalog import InMemoryCartRepository, InMemoryProductRepository, InMemoryUserRepository
from .in_memory_order_store import InMemoryOrderStore

__all__ = [
    "InMemoryCartRepository",
    "InMemoryOrderStore",
    "InMemoryProductRepository",
    "InMemoryUserRepository",
]
