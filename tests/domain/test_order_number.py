"""Tests for OrderNumber."""

from datetime import datetime, timezone

import pytest

from core.domain.value_objects import OrderNumber


def test_generate_uses_date_and_last_six_millisecond_digits():
    now = datetime(2024, 12, 24, 10, 30, 15, 123000, tzinfo=timezone.utc)
    millis = str(int(now.timestamp() * 1000))

    number = OrderNumber.generate(now)

    assert number.value == f"ORD-20241224-{millis[-6:]}"
    assert number.date_part == "20241224"
    assert str(number) == number.value


def test_same_millisecond_gives_same_number():
    now = datetime(2025, 1, 3, tzinfo=timezone.utc)
    assert OrderNumber.generate(now) == OrderNumber.generate(now)


@pytest.mark.parametrize("value", [
    "",
    "ORD-2024122-123456",
    "ORD-20241224-12345",
    "ord-20241224-123456",
    "ORD-20241332-123456",
])
def test_invalid_numbers_are_rejected(value):
    with pytest.raises(ValueError):
        OrderNumber(value)
