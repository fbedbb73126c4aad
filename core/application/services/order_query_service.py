"""Application service for reading placed orders."""

from typing import Optional

from core.application.dtos.order_dto import OrderDTO, OrderListDTO
from core.application.gateways import UserGateway
from core.domain.exceptions import NotFoundError
from core.domain.repositories import OrderStore
from messaging import RequestResponseService


class OrderQueryService:
    """
    Read side for orders.

    Orders are read straight from the store; the owner is resolved through
    the identity module like the write side does.
    """

    def __init__(
        self,
        order_store: OrderStore,
        correlator: RequestResponseService,
        request_timeout: Optional[float] = None,
    ) -> None:
        self._orders = order_store
        self._users = UserGateway(correlator, request_timeout)

    async def get_order(self, order_id: str) -> OrderDTO:
        """Get one order.

        Raises:
            NotFoundError: If no order has this id
        """
        order = await self._orders.find_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order with ID {order_id} not found")
        return OrderDTO.from_order(order)

    async def list_user_orders(self, user_email: str) -> OrderListDTO:
        """List a user's orders, newest first.

        Raises:
            NotFoundError: If the user is unknown
        """
        user = await self._users.find_by_email(user_email)
        orders = await self._orders.find_by_user(user.id)
        return OrderListDTO(orders=[OrderDTO.from_order(o) for o in orders], total=len(orders))
