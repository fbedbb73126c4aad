"""
Order Status Enum.

Lifecycle values stored on an order.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Order status values."""

    PENDING = "pending"
    COMPLETED = "completed"
