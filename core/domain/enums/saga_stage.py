"""
Order creation stages.

Linear progression of one order-creation attempt; any stage may move to FAILED.
"""
from enum import Enum


class OrderCreationStage(str, Enum):
    """Stage reached by an order-creation attempt."""

    START = "start"
    USER_RESOLVED = "user_resolved"
    CART_RESOLVED = "cart_resolved"
    STOCK_VALIDATED = "stock_validated"
    ORDER_PERSISTED = "order_persisted"
    CART_CLEARED = "cart_cleared"
    DONE = "done"
    FAILED = "failed"


class PersistenceMode(str, Enum):
    """How the order write is executed for one attempt."""

    ATOMIC = "atomic"
    BEST_EFFORT = "best_effort"
