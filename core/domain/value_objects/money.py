"""Money value object - pure Python immutable type."""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Union

Number = Union[int, float, str, Decimal]

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary value with currency.

    Amounts are kept as Decimal; floats coming off the bus are converted
    through str() so 19.99 stays 19.99.
    """
    amount: Decimal
    currency: str = "USD"

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

        if not isinstance(self.currency, str) or len(self.currency) != 3:
            raise ValueError(
                f"Currency must be 3-letter ISO code, got: {self.currency}"
            )

    @classmethod
    def of(cls, value: Number, currency: str = "USD") -> 'Money':
        return cls(amount=Decimal(str(value)), currency=currency)

    @classmethod
    def zero(cls, currency: str = "USD") -> 'Money':
        return cls(amount=Decimal("0"), currency=currency)

    @classmethod
    def total(cls, values: Iterable['Money'], currency: str = "USD") -> 'Money':
        """Sum a sequence of Money values (zero when empty)."""
        result = cls.zero(currency)
        for value in values:
            result = result + value
        return result

    def __str__(self) -> str:
        return f"{self.amount.quantize(CENT, rounding=ROUND_HALF_UP)} {self.currency}"

    def __add__(self, other: 'Money') -> 'Money':
        """Add two Money objects (must have same currency)."""
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot add different currencies: {self.currency} vs {other.currency}"
            )
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __mul__(self, quantity: int) -> 'Money':
        """Multiply by a quantity."""
        return Money(amount=self.amount * quantity, currency=self.currency)
