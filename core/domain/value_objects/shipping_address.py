"""Shipping address value object."""
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

from ..exceptions import InvalidInputError

# snake_case field -> wire name
_WIRE_NAMES = {
    "street": "street",
    "city": "city",
    "state": "state",
    "postal_code": "postalCode",
    "country": "country",
    "additional_info": "additionalInfo",
}
REQUIRED_FIELDS = ("street", "city", "state", "postal_code", "country")


@dataclass(frozen=True)
class ShippingAddress:
    """Where an order ships to. Copied into the order, never shared."""
    street: str
    city: str
    state: str
    postal_code: str
    country: str
    additional_info: Optional[str] = None

    def __post_init__(self):
        missing = [
            name for name in REQUIRED_FIELDS
            if not isinstance(getattr(self, name), str) or not getattr(self, name).strip()
        ]
        if missing:
            raise InvalidInputError(
                f"Shipping address is missing required field(s): {', '.join(missing)}"
            )

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ShippingAddress":
        """
        Build from a mapping using either wire (camelCase) or snake_case keys.

        Raises:
            InvalidInputError: If data is empty or a required field is blank
        """
        if not data:
            raise InvalidInputError("Shipping address is required")

        values = {}
        for f in fields(cls):
            wire = _WIRE_NAMES[f.name]
            values[f.name] = data.get(wire, data.get(f.name))
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        data = {_WIRE_NAMES[f.name]: getattr(self, f.name) for f in fields(self)}
        if data["additionalInfo"] is None:
            del data["additionalInfo"]
        return data
