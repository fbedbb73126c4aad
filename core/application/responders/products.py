"""Catalog module responder: product lookup and stock validation."""
from typing import Dict

from core.domain.events import (
    ProductLookupRequest,
    ProductLookupResponse,
    StockValidationRequest,
    StockValidationResponse,
    StockValidationResult,
)
from core.domain.repositories import ProductRepository
from messaging import Event, RequestResponseService, Topic

from .base import ReplyBuilder, Responder


class ProductResponder(Responder):
    def __init__(self, correlator: RequestResponseService, products: ProductRepository):
        super().__init__(correlator)
        self.products = products

    def routes(self) -> Dict[Topic, ReplyBuilder]:
        return {
            Topic.PRODUCT_LOOKUP_REQUEST: self.lookup,
            Topic.STOCK_VALIDATION_REQUEST: self.validate_stock,
        }

    async def lookup(self, request_id: str, event: Event) -> ProductLookupResponse:
        request = ProductLookupRequest.from_payload(event.payload)
        product = await self.products.find_by_id(request.product_id)
        return ProductLookupResponse(request_id=request_id, product=product)

    async def validate_stock(self, request_id: str, event: Event) -> StockValidationResponse:
        """Check each item on its own; one bad item does not stop the others."""
        request = StockValidationRequest.from_payload(event.payload)
        results = []

        for item in request.items:
            product = await self.products.find_by_id(item.product_id)
            if product is None:
                results.append(StockValidationResult(
                    product_id=item.product_id,
                    is_valid=False,
                    available_stock=0,
                    requested_quantity=item.quantity,
                    error=f"Product {item.product_id} not found",
                ))
            elif not product.has_stock(item.quantity):
                results.append(StockValidationResult(
                    product_id=item.product_id,
                    is_valid=False,
                    available_stock=product.stock,
                    requested_quantity=item.quantity,
                    error=(
                        f"Insufficient stock for {product.name}. "
                        f"Available: {product.stock}, Requested: {item.quantity}"
                    ),
                ))
            else:
                results.append(StockValidationResult(
                    product_id=item.product_id,
                    is_valid=True,
                    available_stock=product.stock,
                    requested_quantity=item.quantity,
                ))

        return StockValidationResponse(
            request_id=request_id,
            results=tuple(results),
            all_valid=all(r.is_valid for r in results),
        )
