"""User entity (identity module view)."""
from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """The identity fields the order flow needs."""
    id: str
    email: str
    name: str
