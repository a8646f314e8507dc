"""Repository interfaces."""

from .order_number_allocator import OrderNumberAllocator
from .order_repository import OrderRepository
from .product_repository import ProductRepository
from .store_repository import StoreRepository

__all__ = [
    "OrderNumberAllocator",
    "OrderRepository",
    "ProductRepository",
    "StoreRepository",
]
