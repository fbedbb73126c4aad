"""Application layer - use cases, gateways, responders, handlers and DTOs."""

from .dtos import OrderDTO, OrderItemDTO, OrderListDTO
from .gateways import CartGateway, ProductGateway, UserGateway
from .handlers import StockUpdateHandler, StockUpdateReport
from .services import OrderQueryService
from .use_cases import CreateOrderRequest, CreateOrderUseCase, SagaContext

__all__ = [
    # DTOs
    "OrderDTO",
    "OrderItemDTO",
    "OrderListDTO",
    # Gateways
    "CartGateway",
    "ProductGateway",
    "UserGateway",
    # Handlers
    "StockUpdateHandler",
    "StockUpdateReport",
    # Services
    "OrderQueryService",
    # Use Cases
    "CreateOrderRequest",
    "CreateOrderUseCase",
    "SagaContext",
]
