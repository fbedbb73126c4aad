"""Repository interfaces used by the catalog, cart and identity modules."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities import Cart, Product, User


class ProductRepository(ABC):
    """Products and their stock."""

    @abstractmethod
    async def find_by_id(self, product_id: str) -> Optional[Product]:
        pass

    @abstractmethod
    async def save(self, product: Product) -> None:
        pass


class UserRepository(ABC):
    """Registered users."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        pass


class CartRepository(ABC):
    """One cart per user."""

    @abstractmethod
    async def get_for_user(self, user_id: str) -> Cart:
        """Return the user's cart, creating an empty one if none exists."""
        pass

    @abstractmethod
    async def save(self, cart: Cart) -> None:
        pass
