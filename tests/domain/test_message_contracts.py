"""Tests for the payloads exchanged between modules."""

import pytest

from core.application.responders.base import Responder
from core.domain.entities import Cart, CartLine
from core.domain.events import (
    CartLookupResponse,
    MessageContract,
    OrderCreatedEvent,
    ReplyContract,
    StockValidationResponse,
    StockValidationResult,
)
from core.domain.value_objects import Money


def test_cart_lookup_payload_uses_wire_names():
    cart = Cart(user_id="user-1", lines=[CartLine.priced("p-1", "Keyboard", 3, Money.of(100))])

    payload = CartLookupResponse(request_id="req-1", cart=cart).to_payload()

    assert payload["requestId"] == "req-1"
    assert "error" not in payload
    assert payload["cart"]["totalAmount"] == Money.of(300).amount
    assert payload["cart"]["items"][0] == {
        "productId": "p-1",
        "productName": "Keyboard",
        "quantity": 3,
        "unitPrice": Money.of(100).amount,
        "totalPrice": Money.of(300).amount,
    }


def test_cart_lookup_reads_float_amounts_and_missing_totals():
    reply = CartLookupResponse.from_payload({
        "requestId": "req-1",
        "cart": {
            "userId": "user-1",
            "items": [{"productId": "p-1", "productName": "Pen", "quantity": 2, "unitPrice": 1.1}],
        },
    })

    assert reply.cart.lines[0].line_total == Money.of("2.2")
    assert reply.cart.total == Money.of("2.2")


def test_null_cart():
    reply = CartLookupResponse.from_payload({"requestId": "req-1", "cart": None})
    assert reply.cart is None


def test_stock_validation_failures_keep_request_order():
    response = StockValidationResponse(
        request_id="req-1",
        results=(
            StockValidationResult("p-1", False, 1, 3, "Insufficient stock for Mouse. Available: 1, Requested: 3"),
            StockValidationResult("p-2", True, 10, 1),
            StockValidationResult("p-3", False, 0, 1, "Product p-3 not found"),
        ),
        all_valid=False,
    )

    parsed = StockValidationResponse.from_payload(response.to_payload())

    assert parsed.failures == [
        "Insufficient stock for Mouse. Available: 1, Requested: 3",
        "Product p-3 not found",
    ]
    assert response.to_payload()["validationResults"][1] == {
        "productId": "p-2",
        "isValid": True,
        "availableStock": 10,
        "requestedQuantity": 1,
    }


def test_order_created_payload():
    message = OrderCreatedEvent.from_payload({
        "orderId": "o-1",
        "userId": "u-1",
        "orderNumber": "ORD-20241224-123456",
        "items": [{"productId": "p-1", "quantity": 2, "unitPrice": "10.00"}],
        "totalAmount": "20.00",
    })

    assert message.items[0].quantity == 2
    assert message.total_amount == Money.of(20)
    assert message.to_payload()["items"][0]["productId"] == "p-1"


def test_base_contracts_cannot_be_instantiated():
    with pytest.raises(TypeError):
        MessageContract()
    with pytest.raises(TypeError):
        ReplyContract(request_id="req-1")


def test_responder_must_declare_routes():
    class Incomplete(Responder):
        pass

    with pytest.raises(TypeError):
        Incomplete(correlator=None)
