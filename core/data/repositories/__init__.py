"""Repository implementations."""

from .order_number_allocator_impl import SqlAlchemyOrderNumberAllocator
from .order_repository_impl import SqlAlchemyOrderRepository
from .product_repository_impl import SqlAlchemyProductRepository
from .store_repository_impl import SqlAlchemyStoreRepository

__all__ = [
    "SqlAlchemyOrderNumberAllocator",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyProductRepository",
    "SqlAlchemyStoreRepository",
]
