"""
Catalog contracts: product lookup and stock validation.

Stock validation checks every item independently and reports one result per
item plus an aggregate allValid flag.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..entities import Product
from .base import REQUEST_ID, MessageContract, ReplyContract, amount_of, money_from


@dataclass(frozen=True)
class ProductLookupRequest(MessageContract):
    product_id: str

    def to_payload(self) -> Dict[str, Any]:
        return {"productId": self.product_id}

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ProductLookupRequest":
        return cls(product_id=str(payload.get("productId") or ""))


@dataclass(frozen=True)
class ProductLookupResponse(ReplyContract):
    product: Optional[Product] = None

    def to_payload(self) -> Dict[str, Any]:
        payload = self._base_payload()
        payload["product"] = (
            {
                "id": self.product.id,
                "name": self.product.name,
                "price": amount_of(self.product.price),
                "stock": self.product.stock,
            }
            if self.product else None
        )
        return payload

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ProductLookupResponse":
        data = payload.get("product")
        product = None
        if data:
            product = Product(
                id=str(data.get("id") or data.get("_id")),
                name=data["name"],
                price=money_from(data.get("price")),
                stock=int(data.get("stock", 0)),
            )
        return cls(request_id=payload.get(REQUEST_ID, ""), error=payload.get("error"), product=product)


@dataclass(frozen=True)
class StockValidationItem:
    product_id: str
    quantity: int

    def to_payload(self) -> Dict[str, Any]:
        return {"productId": self.product_id, "quantity": self.quantity}

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "StockValidationItem":
        return cls(product_id=str(payload["productId"]), quantity=int(payload["quantity"]))


@dataclass(frozen=True)
class StockValidationRequest(MessageContract):
    items: Tuple[StockValidationItem, ...]

    def to_payload(self) -> Dict[str, Any]:
        return {"items": [item.to_payload() for item in self.items]}

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "StockValidationRequest":
        return cls(items=tuple(StockValidationItem.from_payload(i) for i in payload.get("items") or []))


@dataclass(frozen=True)
class StockValidationResult:
    """Outcome for one requested item."""
    product_id: str
    is_valid: bool
    available_stock: int
    requested_quantity: int
    error: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "productId": self.product_id,
            "isValid": self.is_valid,
            "availableStock": self.available_stock,
            "requestedQuantity": self.requested_quantity,
        }
        if self.error:
            payload["error"] = self.error
        return payload

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "StockValidationResult":
        return cls(
            product_id=str(payload["productId"]),
            is_valid=bool(payload.get("isValid")),
            available_stock=int(payload.get("availableStock", 0)),
            requested_quantity=int(payload.get("requestedQuantity", 0)),
            error=payload.get("error"),
        )


@dataclass(frozen=True)
class StockValidationResponse(ReplyContract):
    results: Tuple[StockValidationResult, ...] = ()
    all_valid: bool = False

    @property
    def failures(self) -> List[str]:
        """Per-item reasons for every invalid item, in request order."""
        return [
            r.error or f"Product {r.product_id}: requested {r.requested_quantity}, available {r.available_stock}"
            for r in self.results
            if not r.is_valid
        ]

    def to_payload(self) -> Dict[str, Any]:
        payload = self._base_payload()
        payload["validationResults"] = [r.to_payload() for r in self.results]
        payload["allValid"] = self.all_valid
        return payload

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "StockValidationResponse":
        results = tuple(
            StockValidationResult.from_payload(r) for r in payload.get("validationResults") or []
        )
        return cls(
            request_id=payload.get(REQUEST_ID, ""),
            error=payload.get("error"),
            results=results,
            all_valid=bool(payload.get("allValid")),
        )
