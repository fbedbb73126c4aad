"""
In-memory catalog, cart and user repositories.

Backing stores for the in-process responders and the stock-update handler.
"""
import copy
import logging
import uuid
from typing import Dict, Iterable, Optional

from core.domain.entities import Cart, Product, User
from core.domain.repositories import CartRepository, ProductRepository, UserRepository


logger = logging.getLogger(__name__)


class InMemoryProductRepository(ProductRepository):
    """Products keyed by id. Stored values are copies, as a database would hold."""

    def __init__(self, products: Iterable[Product] = ()):
        self._storage: Dict[str, Product] = {}
        for product in products:
            self._storage[product.id] = copy.deepcopy(product)

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        product = self._storage.get(product_id)
        return copy.deepcopy(product) if product else None

    async def save(self, product: Product) -> None:
        self._storage[product.id] = copy.deepcopy(product)
        logger.debug(f"Product saved: {product.id} (stock: {product.stock})")

    def stock_of(self, product_id: str) -> int:
        """Current stock of a product (KeyError if unknown)."""
        return self._storage[product_id].stock


class InMemoryUserRepository(UserRepository):
    """Users keyed by email."""

    def __init__(self, users: Iterable[User] = ()):
        self._by_email: Dict[str, User] = {user.email: user for user in users}

    async def find_by_email(self, email: str) -> Optional[User]:
        return self._by_email.get(email)

    def register(self, email: str, name: str) -> User:
        user = User(id=str(uuid.uuid4()), email=email, name=name)
        self._by_email[email] = user
        return user


class InMemoryCartRepository(CartRepository):
    """One cart per user id; a missing cart is created empty on first read."""

    def __init__(self):
        self._storage: Dict[str, Cart] = {}

    async def get_for_user(self, user_id: str) -> Cart:
        cart = self._storage.get(user_id)
        if cart is None:
            cart = Cart(user_id=user_id)
            self._storage[user_id] = cart
        return copy.deepcopy(cart)

    async def save(self, cart: Cart) -> None:
        self._storage[cart.user_id] = copy.deepcopy(cart)
