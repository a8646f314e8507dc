"""SQLAlchemy ORM models for Order aggregate."""

import uuid

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import relationship

from core.domain.value_objects import utcnow

from .base import Base


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Human-facing number from the global sequence; NULL only on legacy rows
    order_number = Column(BigInteger, unique=True, nullable=True)

    store_id = Column(String(36), ForeignKey("stores.id"), nullable=False, index=True)
    total = Column(Numeric(14, 2), nullable=False)

    customer_name = Column(String(255), nullable=True)
    address = Column(String(1000), nullable=True)
    payment_method = Column(String(100), nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationship to items
    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="OrderItemModel.id",
    )

    __table_args__ = (
        Index("ix_orders_store_created_at", "store_id", "created_at"),
        Index("ix_orders_created_at", "created_at"),
    )

    def __repr__(self):
        return f"<OrderModel(id={self.id}, order_number={self.order_number}, total={self.total})>"


class OrderItemModel(Base):
    """SQLAlchemy ORM model for order_items table."""

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(
        String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Plain reference: products may be deleted after the sale
    product_id = Column(String(36), nullable=False, index=True)

    # Snapshots taken at purchase time
    name = Column(String(255), nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    quantity = Column(Integer, nullable=False)

    # Relationship back to order
    order = relationship("OrderModel", back_populates="items")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_order_items_quantity_positive"),
    )

    def __repr__(self):
        return f"<OrderItemModel(id={self.id}, product_id={self.product_id}, quantity={self.quantity})>"


class OrderNumberCounterModel(Base):
    """
    Durable counter row for databases without native sequences.

    PostgreSQL deployments use a real SEQUENCE instead; see
    SqlAlchemyOrderNumberAllocator.
    """

    __tablename__ = "order_number_counters"

    name = Column(String(63), primary_key=True)
    value = Column(BigInteger, nullable=False, default=0)

    def __repr__(self):
        return f"<OrderNumberCounterModel(name={self.name}, value={self.value})>"
