"""
Create Order Use Case.

Turns a user's cart into a placed order by coordinating the identity,
catalog and cart modules over correlated requests.

Flow:
1. Validate the shipping address
2. Resolve user and cart (two requests in flight at once, fail fast)
3. Reject an empty cart
4. Validate stock for every line in one request
5. Snapshot the cart into an order and persist it (atomic when the store
   supports transactions, best effort otherwise)
6. Clear the cart (best effort: failure is logged, the order stands)
7. Broadcast order.created for the stock-update handler (not awaited)

Single attempt, no retries. Stock read in step 4 is not reserved: two
concurrent orders for the last unit can both pass validation.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, List, Mapping, Optional

from core.application.gateways import CartGateway, ProductGateway, UserGateway
from core.application.use_cases.persistence import select_persistence
from core.domain.entities import Cart, Order, User
from core.domain.enums import OrderCreationStage, PersistenceMode
from core.domain.events import OrderCreatedEvent, StockValidationItem, StockValidationResponse
from core.domain.exceptions import (
    EmptyCartError,
    InsufficientStockError,
    InvalidInputError,
)
from core.domain.repositories import OrderStore
from core.domain.value_objects import ShippingAddress
from messaging import Event, EventBusProtocol, RequestResponseService, Topic


logger = logging.getLogger(__name__)


# =============================================================================
# REQUEST / CONTEXT
# =============================================================================

@dataclass
class CreateOrderRequest:
    """
    Input for the create order use case.

    shipping_address accepts wire (camelCase) or snake_case keys.
    """
    user_email: str
    shipping_address: Optional[Mapping[str, Any]] = None


@dataclass
class SagaContext:
    """
    Intermediate results of one order-creation attempt.

    Lives for a single execute() call and is never persisted.
    """
    user_email: str
    stage: OrderCreationStage = OrderCreationStage.START
    history: List[OrderCreationStage] = field(default_factory=lambda: [OrderCreationStage.START])
    persistence_mode: Optional[PersistenceMode] = None
    user: Optional[User] = None
    cart: Optional[Cart] = None
    stock: Optional[StockValidationResponse] = None
    order: Optional[Order] = None
    error: Optional[BaseException] = None

    def advance(self, stage: OrderCreationStage) -> None:
        self.stage = stage
        self.history.append(stage)
        logger.debug(f"Order creation for {self.user_email}: {stage.value}")

    def fail(self, error: BaseException) -> None:
        failed_at = self.stage
        self.error = error
        self.advance(OrderCreationStage.FAILED)
        logger.warning(
            f"Order creation for {self.user_email} failed after {failed_at.value}: "
            f"{type(error).__name__}: {error}"
        )


# =============================================================================
# USE CASE
# =============================================================================

class CreateOrderUseCase:
    """
    Order-creation orchestrator.

    Callers get the persisted Order or exactly one error. Partial progress
    (order persisted, cart not cleared) is not rolled back.
    """

    def __init__(
        self,
        correlator: RequestResponseService,
        order_store: OrderStore,
        event_bus: EventBusProtocol,
        request_timeout: Optional[float] = None,
        clock: Optional[Callable[[], datetime]] = None,
        observer: Optional[Callable[[SagaContext], None]] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            correlator: Request/response service used for every module call
            order_store: Where orders are written
            event_bus: Bus the order.created broadcast goes out on
            request_timeout: Per-request timeout (correlator default if None)
            clock: Source of "now" for order numbers and timestamps
            observer: Called with the finished SagaContext (success or failure)
        """
        self.users = UserGateway(correlator, request_timeout)
        self.carts = CartGateway(correlator, request_timeout)
        self.products = ProductGateway(correlator, request_timeout)
        self.order_store = order_store
        self.event_bus = event_bus
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._observer = observer

    async def execute(self, request: CreateOrderRequest) -> Order:
        """
        Execute the order-creation workflow.

        Raises:
            InvalidInputError: Missing email or shipping address field
            NotFoundError: User or cart unknown
            EmptyCartError: Cart has no lines
            InsufficientStockError: At least one line exceeds available stock
            ConflictError: Generated order number already taken
            RequestTimeoutError: A module did not answer in time
            DomainError: A module answered with an error
        """
        ctx = SagaContext(user_email=request.user_email)
        try:
            order = await self._run(ctx, request)
        except Exception as exc:
            ctx.fail(exc)
            raise
        finally:
            if self._observer is not None:
                self._observer(ctx)
        return order

    async def _run(self, ctx: SagaContext, request: CreateOrderRequest) -> Order:
        # Step 1: input
        if not request.user_email or not request.user_email.strip():
            raise InvalidInputError("User email is required")
        shipping_address = ShippingAddress.from_dict(request.shipping_address)

        persistence = await select_persistence(self.order_store)
        ctx.persistence_mode = persistence.mode

        # Step 2: user and cart, concurrently
        ctx.user, ctx.cart = await asyncio.gather(
            self.users.find_by_email(request.user_email),
            self.carts.get_cart(request.user_email),
        )
        ctx.advance(OrderCreationStage.USER_RESOLVED)
        ctx.advance(OrderCreationStage.CART_RESOLVED)

        # Step 3: empty cart
        if ctx.cart.is_empty():
            raise EmptyCartError()

        # Step 4: stock
        ctx.stock = await self.products.validate_stock(
            StockValidationItem(product_id=line.product_id, quantity=line.quantity)
            for line in ctx.cart.lines
        )
        if not ctx.stock.all_valid:
            raise InsufficientStockError(ctx.stock.failures)
        ctx.advance(OrderCreationStage.STOCK_VALIDATED)

        # Step 5: snapshot and persist
        order = Order.place(
            user_id=ctx.user.id,
            cart=ctx.cart,
            shipping_address=shipping_address,
            now=self._clock(),
        )
        ctx.order = await persistence.persist(order)
        ctx.advance(OrderCreationStage.ORDER_PERSISTED)
        logger.info(
            f"✅ Order created: {order.order_number} (id: {order.id}) for user: "
            f"{request.user_email} [{persistence.mode.value}]"
        )

        # Step 6: clear cart (best effort)
        try:
            await self.carts.clear_cart(request.user_email)
            ctx.advance(OrderCreationStage.CART_CLEARED)
        except Exception as exc:
            logger.error(
                f"Cart clear failed for {request.user_email} after order "
                f"{order.order_number} was persisted: {exc}",
                exc_info=True,
            )

        # Step 7: hand off to the stock-update handler
        message = OrderCreatedEvent.from_order(order)
        self.event_bus.publish_nowait(
            Event.create(Topic.ORDER_CREATED, message.to_payload(), source="orders")
        )

        ctx.advance(OrderCreationStage.DONE)
        return ctx.order
