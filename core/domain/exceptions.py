"""
Domain exceptions.

Every error raised by the messaging layer, the order saga and the stores
derives from ShopmeshError so callers can catch one family.
"""
from typing import List, Optional


class ShopmeshError(Exception):
    """Base class for all shopmesh errors."""


class MessagingError(ShopmeshError):
    """Bus or correlator misuse (closed correlator, topic without reply)."""


class RequestTimeoutError(ShopmeshError):
    """No reply arrived for a correlated request before its deadline."""

    def __init__(self, topic: str, request_id: str, timeout: float):
        self.topic = topic
        self.request_id = request_id
        self.timeout = timeout
        super().__init__(f"Request {topic} ({request_id}) timed out after {timeout:g}s")


class DomainError(ShopmeshError):
    """A responder answered with an explicit error string."""


class InvalidInputError(ShopmeshError):
    """A required field of an order request is missing or blank."""


class NotFoundError(ShopmeshError):
    """A referenced user, cart, product or order does not exist."""


class EmptyCartError(ShopmeshError):
    """The cart has no lines and cannot become an order."""

    def __init__(self, message: str = "Cart is empty"):
        super().__init__(message)


class InsufficientStockError(ShopmeshError):
    """
    One or more cart lines failed stock validation.

    The message joins every per-line reason; `failures` keeps them apart.
    """

    def __init__(self, failures: List[str], message: Optional[str] = None):
        self.failures = list(failures)
        super().__init__(message or "; ".join(self.failures))


class ConflictError(ShopmeshError):
    """Store-level uniqueness violation (e.g. duplicate order number)."""
