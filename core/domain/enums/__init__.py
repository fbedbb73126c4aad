"""Domain enums."""

from .order_status import OrderStatus
from .saga_stage import OrderCreationStage, PersistenceMode

__all__ = ["OrderCreationStage", "OrderStatus", "PersistenceMode"]
