"""Application DTOs."""
from .order_dto import OrderDTO, OrderItemDTO, OrderListDTO

__all__ = ["OrderDTO", "OrderItemDTO", "OrderListDTO"]
