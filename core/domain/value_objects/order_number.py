"""Order number value object."""
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

_PATTERN = re.compile(r"^ORD-(\d{8})-(\d{6})$")


@dataclass(frozen=True)
class OrderNumber:
    """
    Human-facing order identifier.

    Format: ORD-<YYYYMMDD>-<NNNNNN>, where the suffix is the last six digits
    of the creation time in epoch milliseconds. Examples:
    - ORD-20241224-482913
    - ORD-20250103-000517

    Two orders created in the same millisecond (or a million milliseconds
    apart on the same day) get the same number; the store's unique index is
    what rejects the second one.
    """
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("Order number cannot be empty")

        match = _PATTERN.match(self.value)
        if not match:
            raise ValueError(
                f"Invalid order number format (expected ORD-YYYYMMDD-NNNNNN): {self.value}"
            )

        try:
            datetime.strptime(match.group(1), "%Y%m%d")
        except ValueError:
            raise ValueError(f"Invalid date in order number: {self.value}") from None

    @classmethod
    def generate(cls, now: Optional[datetime] = None) -> "OrderNumber":
        """Build an order number from `now` (defaults to the current UTC time)."""
        now = now or datetime.now(timezone.utc)
        millis = int(now.timestamp() * 1000)
        return cls(f"ORD-{now:%Y%m%d}-{str(millis)[-6:]}")

    @property
    def date_part(self) -> str:
        return self.value[4:12]

    def __str__(self) -> str:
        return self.value
