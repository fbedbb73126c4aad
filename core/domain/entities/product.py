"""Product entity (catalog module view)."""
from dataclasses import dataclass

from ..value_objects import Money


@dataclass
class Product:
    """Catalog product with its available stock."""
    id: str
    name: str
    price: Money
    stock: int

    def __post_init__(self):
        if not isinstance(self.price, Money):
            self.price = Money.of(self.price)
        if self.stock < 0:
            raise ValueError(f"Stock cannot be negative for product {self.id}: {self.stock}")

    def has_stock(self, quantity: int) -> bool:
        return self.stock >= quantity

    def decrement_stock(self, quantity: int) -> None:
        """Business rule: stock never goes below zero through this method."""
        if quantity <= 0:
            raise ValueError(f"Quantity must be positive, got {quantity}")
        if not self.has_stock(quantity):
            raise ValueError(
                f"Insufficient stock for {self.name}. "
                f"Available: {self.stock}, Requested: {quantity}"
            )
        self.stock -= quantity
