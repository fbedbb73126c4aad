"""
Cart aggregate (cart module view).

The total is derived from the lines, so it cannot drift from their sum.
"""
from dataclasses import dataclass, field
from typing import List

from ..value_objects import Money


@dataclass(frozen=True)
class CartLine:
    """One product in a cart, priced when it was added."""
    product_id: str
    product_name: str
    quantity: int
    unit_price: Money
    line_total: Money

    @classmethod
    def priced(cls, product_id: str, product_name: str, quantity: int, unit_price: Money) -> "CartLine":
        return cls(
            product_id=product_id,
            product_name=product_name,
            quantity=quantity,
            unit_price=unit_price,
            line_total=unit_price * quantity,
        )


@dataclass
class Cart:
    """A user's cart."""
    user_id: str
    lines: List[CartLine] = field(default_factory=list)

    @property
    def total(self) -> Money:
        if not self.lines:
            return Money.zero()
        return Money.total(
            (line.line_total for line in self.lines),
            currency=self.lines[0].line_total.currency,
        )

    def is_empty(self) -> bool:
        return not self.lines

    def add_line(self, line: CartLine) -> None:
        """Add a line, merging quantities when the product is already present."""
        for index, existing in enumerate(self.lines):
            if existing.product_id == line.product_id:
                self.lines[index] = CartLine.priced(
                    product_id=existing.product_id,
                    product_name=existing.product_name,
                    quantity=existing.quantity + line.quantity,
                    unit_price=existing.unit_price,
                )
                return
        self.lines.append(line)

    def clear(self) -> None:
        self.lines = []
