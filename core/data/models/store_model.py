"""SQLAlchemy ORM models for stores and products."""

import uuid

from sqlalchemy import (
    JSON,
    Boolean,
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


def _new_id() -> str:
    return str(uuid.uuid4())


class StoreModel(Base):
    """SQLAlchemy ORM model for stores table."""

    __tablename__ = "stores"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(255), nullable=False)
    user_id = Column(String(255), nullable=True, index=True)

    # Lists of {"method": ..., "status": "Active" | "Inactive"}
    payment_methods = Column(JSON, nullable=True)
    shipping_methods = Column(JSON, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    products = relationship("ProductModel", back_populates="store")

    def __repr__(self):
        return f"<StoreModel(id={self.id}, name={self.name})>"


class ProductModel(Base):
    """SQLAlchemy ORM model for products table."""

    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=_new_id)
    store_id = Column(String(36), ForeignKey("stores.id"), nullable=False, index=True)
    category_id = Column(String(36), nullable=True, index=True)

    name = Column(String(255), nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)

    is_featured = Column(Boolean, nullable=False, default=False)
    is_archived = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    store = relationship("StoreModel", back_populates="products")

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_products_quantity_non_negative"),
        Index("ix_products_store_archived", "store_id", "is_archived"),
    )

    def __repr__(self):
        return f"<ProductModel(id={self.id}, name={self.name}, quantity={self.quantity})>"
