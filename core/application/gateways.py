"""
Typed gateways to the identity, catalog and cart modules.

Each gateway turns a contract into a correlated request, awaits the reply
and hands back domain values. Timeouts and reply errors propagate as raised
by the correlator.
"""
from typing import Iterable, Optional

from core.domain.entities import Cart, Product, User
from core.domain.events import (
    CartClearRequest,
    CartClearResponse,
    CartLookupRequest,
    CartLookupResponse,
    MessageContract,
    ProductLookupRequest,
    ProductLookupResponse,
    StockValidationItem,
    StockValidationRequest,
    StockValidationResponse,
    UserLookupRequest,
    UserLookupResponse,
)
from core.domain.exceptions import DomainError, NotFoundError
from messaging import Event, RequestResponseService, Topic


class _Gateway:
    source = "gateway"

    def __init__(self, correlator: RequestResponseService, timeout: Optional[float] = None):
        self._correlator = correlator
        self._timeout = timeout

    async def _call(self, topic: Topic, request: MessageContract) -> dict:
        event = Event.create(topic, request.to_payload(), source=self.source)
        return await self._correlator.send_request(event, timeout=self._timeout)


class UserGateway(_Gateway):
    source = "orders"

    async def find_by_email(self, email: str) -> User:
        """
        Raises:
            NotFoundError: If no user has this email
        """
        payload = await self._call(Topic.USER_LOOKUP_REQUEST, UserLookupRequest(email=email))
        reply = UserLookupResponse.from_payload(payload)
        if reply.user is None:
            raise NotFoundError(f"User {email} not found")
        return reply.user


class ProductGateway(_Gateway):
    source = "orders"

    async def get_product(self, product_id: str) -> Product:
        """
        Raises:
            NotFoundError: If the product does not exist
        """
        payload = await self._call(
            Topic.PRODUCT_LOOKUP_REQUEST, ProductLookupRequest(product_id=product_id)
        )
        reply = ProductLookupResponse.from_payload(payload)
        if reply.product is None:
            raise NotFoundError(f"Product {product_id} not found")
        return reply.product

    async def validate_stock(self, items: Iterable[StockValidationItem]) -> StockValidationResponse:
        """Validate all items in one request; the caller decides what to do with failures."""
        request = StockValidationRequest(items=tuple(items))
        payload = await self._call(Topic.STOCK_VALIDATION_REQUEST, request)
        return StockValidationResponse.from_payload(payload)


class CartGateway(_Gateway):
    source = "orders"

    async def get_cart(self, user_email: str) -> Cart:
        """
        Raises:
            NotFoundError: If the cart module has no cart for this user
        """
        payload = await self._call(Topic.CART_LOOKUP_REQUEST, CartLookupRequest(user_email=user_email))
        reply = CartLookupResponse.from_payload(payload)
        if reply.cart is None:
            raise NotFoundError(f"Cart for {user_email} not found")
        return reply.cart

    async def clear_cart(self, user_email: str) -> None:
        """
        Raises:
            DomainError: If the cart module reports the clear as unsuccessful
        """
        payload = await self._call(Topic.CART_CLEAR_REQUEST, CartClearRequest(user_email=user_email))
        reply = CartClearResponse.from_payload(payload)
        if not reply.success:
            raise DomainError(f"Cart for {user_email} was not cleared")
