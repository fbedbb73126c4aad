"""Cart module responder: cart lookup and cart clear."""
from typing import Dict

from core.domain.events import CartClearRequest, CartClearResponse, CartLookupRequest, CartLookupResponse
from core.domain.repositories import CartRepository, UserRepository
from messaging import Event, RequestResponseService, Topic

from .base import ReplyBuilder, Responder


class CartResponder(Responder):
    def __init__(self, correlator: RequestResponseService, carts: CartRepository, users: UserRepository):
        super().__init__(correlator)
        self.carts = carts
        self.users = users

    def routes(self) -> Dict[Topic, ReplyBuilder]:
        return {
            Topic.CART_LOOKUP_REQUEST: self.lookup,
            Topic.CART_CLEAR_REQUEST: self.clear,
        }

    async def lookup(self, request_id: str, event: Event) -> CartLookupResponse:
        request = CartLookupRequest.from_payload(event.payload)
        user = await self.users.find_by_email(request.user_email)
        if user is None:
            return CartLookupResponse(request_id=request_id, cart=None)
        cart = await self.carts.get_for_user(user.id)
        return CartLookupResponse(request_id=request_id, cart=cart)

    async def clear(self, request_id: str, event: Event) -> CartClearResponse:
        request = CartClearRequest.from_payload(event.payload)
        user = await self.users.find_by_email(request.user_email)
        if user is None:
            return CartClearResponse(
                request_id=request_id,
                success=False,
                error=f"User {request.user_email} not found",
            )
        cart = await self.carts.get_for_user(user.id)
        cart.clear()
        await self.carts.save(cart)
        return CartClearResponse(request_id=request_id, success=True)
