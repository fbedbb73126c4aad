"""
SQLAlchemy ORM Models.

Maps domain entities to database tables.
"""
from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import declarative_base, relationship


Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# ORDER MODEL
# =============================================================================

class OrderModel(Base):
    """
    Order database model.

    order_number is unique: a duplicate insert is how colliding generated
    numbers are detected.
    """

    __tablename__ = "orders"

    id = Column(String(36), primary_key=True)
    order_number = Column(String(32), unique=True, nullable=False, index=True)
    user_id = Column(String(64), nullable=False, index=True)

    status = Column(String(20), nullable=False, default="pending", index=True)

    total_amount = Column(Numeric(15, 2), nullable=False)
    currency = Column(String(3), nullable=False, default="USD")

    # Snapshot of the shipping address at placement time
    shipping_address = Column(JSON, nullable=False)

    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)

    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.position",
    )

    __table_args__ = (
        Index("ix_orders_user_created", "user_id", "created_at"),
    )

    def __repr__(self):
        return f"<OrderModel(id={self.id}, order_number={self.order_number}, status={self.status})>"


# =============================================================================
# ORDER ITEM MODEL
# =============================================================================

class OrderItemModel(Base):
    """
    Order item database model.

    Name and prices are copied from the cart; no foreign key to the catalog.
    """

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(String(36), ForeignKey("orders.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)

    product_id = Column(String(64), nullable=False, index=True)
    product_name = Column(String(500), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(15, 2), nullable=False)
    line_total = Column(Numeric(15, 2), nullable=False)

    order = relationship("OrderModel", back_populates="items")

    def __repr__(self):
        return f"<OrderItemModel(order_id={self.order_id}, product_id={self.product_id}, qty={self.quantity})>"
