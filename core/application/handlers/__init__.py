"""Event handlers."""
from .stock_update import StockUpdateHandler, StockUpdateReport

__all__ = ["StockUpdateHandler", "StockUpdateReport"]
