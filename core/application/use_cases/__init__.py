"""Application use cases."""
from .create_order import CreateOrderRequest, CreateOrderUseCase, SagaContext
from .persistence import (
    AtomicPersistence,
    BestEffortPersistence,
    PersistenceStrategy,
    select_persistence,
)

__all__ = [
    "AtomicPersistence",
    "BestEffortPersistence",
    "CreateOrderRequest",
    "CreateOrderUseCase",
    "PersistenceStrategy",
    "SagaContext",
    "select_persistence",
]
