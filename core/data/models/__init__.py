"""Database models."""

from .base import Base
from .order_model import OrderItemModel, OrderModel, OrderNumberCounterModel
from .store_model import ProductModel, StoreModel

__all__ = [
    "Base",
    "OrderItemModel",
    "OrderModel",
    "OrderNumberCounterModel",
    "ProductModel",
    "StoreModel",
]
