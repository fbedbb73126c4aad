"""
Cart contracts: cart lookup and cart clear.
"""
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..entities import Cart, CartLine
from .base import REQUEST_ID, MessageContract, ReplyContract, amount_of, money_from


@dataclass(frozen=True)
class CartLookupRequest(MessageContract):
    user_email: str

    def to_payload(self) -> Dict[str, Any]:
        return {"userEmail": self.user_email}

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CartLookupRequest":
        return cls(user_email=str(payload.get("userEmail") or ""))


@dataclass(frozen=True)
class CartLookupResponse(ReplyContract):
    cart: Optional[Cart] = None

    def to_payload(self) -> Dict[str, Any]:
        payload = self._base_payload()
        if self.cart is None:
            payload["cart"] = None
            return payload

        payload["cart"] = {
            "userId": self.cart.user_id,
            "items": [
                {
                    "productId": line.product_id,
                    "productName": line.product_name,
                    "quantity": line.quantity,
                    "unitPrice": amount_of(line.unit_price),
                    "totalPrice": amount_of(line.line_total),
                }
                for line in self.cart.lines
            ],
            "totalAmount": amount_of(self.cart.total),
        }
        return payload

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CartLookupResponse":
        data = payload.get("cart")
        cart = None
        if data:
            lines = []
            for item in data.get("items") or []:
                unit_price = money_from(item.get("unitPrice"))
                quantity = int(item["quantity"])
                total_price = item.get("totalPrice")
                lines.append(
                    CartLine(
                        product_id=str(item["productId"]),
                        product_name=item.get("productName", ""),
                        quantity=quantity,
                        unit_price=unit_price,
                        line_total=money_from(total_price) if total_price is not None else unit_price * quantity,
                    )
                )
            cart = Cart(user_id=str(data.get("userId", "")), lines=lines)
        return cls(request_id=payload.get(REQUEST_ID, ""), error=payload.get("error"), cart=cart)


@dataclass(frozen=True)
class CartClearRequest(MessageContract):
    user_email: str

    def to_payload(self) -> Dict[str, Any]:
        return {"userEmail": self.user_email}

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CartClearRequest":
        return cls(user_email=str(payload.get("userEmail") or ""))


@dataclass(frozen=True)
class CartClearResponse(ReplyContract):
    success: bool = False

    def to_payload(self) -> Dict[str, Any]:
        payload = self._base_payload()
        payload["success"] = self.success
        return payload

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CartClearResponse":
        return cls(
            request_id=payload.get(REQUEST_ID, ""),
            error=payload.get("error"),
            success=bool(payload.get("success")),
        )
