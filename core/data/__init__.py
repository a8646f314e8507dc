"""Data layer - infrastructure persistence and mapping."""

from .mappers import OrderItemMapper, OrderMapper, ProductMapper, StoreMapper
from .models import (
    Base,
    OrderItemModel,
    OrderModel,
    OrderNumberCounterModel,
    ProductModel,
    StoreModel,
)
from .repositories import (
    SqlAlchemyOrderNumberAllocator,
    SqlAlchemyOrderRepository,
    SqlAlchemyProductRepository,
    SqlAlchemyStoreRepository,
)
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "create_uow",
    "OrderItemMapper",
    "OrderItemModel",
    "OrderMapper",
    "OrderModel",
    "OrderNumberCounterModel",
    "ProductMapper",
    "ProductModel",
    "SqlAlchemyOrderNumberAllocator",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyProductRepository",
    "SqlAlchemyStoreRepository",
    "StoreMapper",
    "StoreModel",
    "UnitOfWork",
]
