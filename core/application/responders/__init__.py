"""In-process responders for the identity, catalog and cart modules."""
from .base import Responder
from .carts import CartResponder
from .products import ProductResponder
from .users import UserResponder

__all__ = ["CartResponder", "ProductResponder", "Responder", "UserResponder"]
