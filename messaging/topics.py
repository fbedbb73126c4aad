"""
Topic catalogue.

All topic names live here. A request topic `<family>.request` is answered on
`<family>.response`; responders subscribe to the request side, the correlator
listens on the response side. `order.created` is a broadcast with no reply.
"""
from enum import Enum
from typing import Dict

from core.domain.events.base import REQUEST_ID
from core.domain.exceptions import MessagingError


class Topic(str, Enum):
    """Every topic used on the bus."""

    USER_LOOKUP_REQUEST = "user.lookup.request"
    USER_LOOKUP_RESPONSE = "user.lookup.response"

    PRODUCT_LOOKUP_REQUEST = "product.lookup.request"
    PRODUCT_LOOKUP_RESPONSE = "product.lookup.response"

    STOCK_VALIDATION_REQUEST = "stock.validation.request"
    STOCK_VALIDATION_RESPONSE = "stock.validation.response"

    CART_LOOKUP_REQUEST = "cart.lookup.request"
    CART_LOOKUP_RESPONSE = "cart.lookup.response"

    CART_CLEAR_REQUEST = "cart.clear.request"
    CART_CLEAR_RESPONSE = "cart.clear.response"

    ORDER_CREATED = "order.created"

    def __str__(self) -> str:
        return self.value


REPLY_TOPICS: Dict[Topic, Topic] = {
    Topic.USER_LOOKUP_REQUEST: Topic.USER_LOOKUP_RESPONSE,
    Topic.PRODUCT_LOOKUP_REQUEST: Topic.PRODUCT_LOOKUP_RESPONSE,
    Topic.STOCK_VALIDATION_REQUEST: Topic.STOCK_VALIDATION_RESPONSE,
    Topic.CART_LOOKUP_REQUEST: Topic.CART_LOOKUP_RESPONSE,
    Topic.CART_CLEAR_REQUEST: Topic.CART_CLEAR_RESPONSE,
}

# Field carrying the correlation token in request and reply payloads.
REQUEST_ID_FIELD = REQUEST_ID


def reply_topic_for(topic: str) -> Topic:
    """
    Map a request topic to the topic its reply is published on.

    Raises:
        MessagingError: If the topic is unknown or has no reply (broadcast)
    """
    try:
        return REPLY_TOPICS[Topic(topic)]
    except (KeyError, ValueError):
        raise MessagingError(f"Topic {topic!s} has no reply topic") from None
