"""Domain layer - pure domain models and interfaces."""

from .entities import Order, OrderItem, Product, Store
from .repositories import (
    OrderNumberAllocator,
    OrderRepository,
    ProductRepository,
    StoreRepository,
)
from .value_objects import CheckoutMethod, ExecutionID, MethodStatus

__all__ = [
    "CheckoutMethod",
    "ExecutionID",
    "MethodStatus",
    "Order",
    "OrderItem",
    "OrderNumberAllocator",
    "OrderRepository",
    "Product",
    "ProductRepository",
    "Store",
    "StoreRepository",
]
