"""
Base message contract.

Every request, reply and broadcast exchanged between modules is a frozen
dataclass that converts to and from the camelCase payload carried on the bus.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional

from ..value_objects import Money

# Correlation field; filled in by the correlator, echoed back by responders.
REQUEST_ID = "requestId"


@dataclass(frozen=True)
class MessageContract(ABC):
    """
    Base class for message contracts.

    Subclasses implement to_payload() and from_payload().
    """

    @abstractmethod
    def to_payload(self) -> Dict[str, Any]:
        """
        Convert to the payload published on the bus.

        Returns:
            Name-to-value mapping using wire (camelCase) names
        """
        pass

    @classmethod
    @abstractmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "MessageContract":
        """
        Build the contract from a bus payload.

        Args:
            payload: Payload as received from the bus
        """
        pass


@dataclass(frozen=True)
class ReplyContract(MessageContract):
    """A reply: the echoed requestId plus an optional error string."""

    request_id: str
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return bool(self.error)

    def _base_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {REQUEST_ID: self.request_id}
        if self.error:
            payload["error"] = self.error
        return payload


def money_from(value: Any) -> Money:
    """Read a wire amount (int, float, str or Decimal) as Money."""
    if isinstance(value, Money):
        return value
    return Money.of(value if value is not None else 0)


def amount_of(money: Money) -> Decimal:
    """Write Money as a wire amount."""
    return money.amount
