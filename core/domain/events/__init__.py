"""Message contracts exchanged between modules."""
from .base import REQUEST_ID, MessageContract, ReplyContract
from .cart_events import CartClearRequest, CartClearResponse, CartLookupRequest, CartLookupResponse
from .order_events import OrderCreatedEvent, OrderCreatedItem
from .product_events import (
    ProductLookupRequest,
    ProductLookupResponse,
    StockValidationItem,
    StockValidationRequest,
    StockValidationResponse,
    StockValidationResult,
)
from .user_events import UserLookupRequest, UserLookupResponse

__all__ = [
    "REQUEST_ID",
    "CartClearRequest",
    "CartClearResponse",
    "CartLookupRequest",
    "CartLookupResponse",
    "MessageContract",
    "OrderCreatedEvent",
    "OrderCreatedItem",
    "ProductLookupRequest",
    "ProductLookupResponse",
    "ReplyContract",
    "StockValidationItem",
    "StockValidationRequest",
    "StockValidationResponse",
    "StockValidationResult",
    "UserLookupRequest",
    "UserLookupResponse",
]
