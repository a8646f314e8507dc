"""Domain entities."""

from .order import Order, OrderItem
from .product import Product
from .store import Store

__all__ = ["Order", "OrderItem", "Product", "Store"]
