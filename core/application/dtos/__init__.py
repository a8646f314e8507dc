"""Application DTOs."""

from .checkout_dto import (
    CheckoutFailureDTO,
    CheckoutItemRequest,
    CheckoutRequest,
    CheckoutResponse,
)
from .order_dto import OrderDTO, OrderItemDTO, OrderListDTO, OrderResponse
from .product_dto import ProductDTO, ProductFlagsUpdate, ProductQuantityUpdate
from .sales_dto import MonthlySalesDTO, SalesSummaryDTO
from .store_dto import CheckoutMethodDTO, StoreDTO, StoreSettingsUpdate

__all__ = [
    "CheckoutFailureDTO",
    "CheckoutMethodDTO",
    "CheckoutItemRequest",
    "CheckoutRequest",
    "CheckoutResponse",
    "MonthlySalesDTO",
    "OrderDTO",
    "OrderItemDTO",
    "OrderListDTO",
    "OrderResponse",
    "ProductDTO",
    "ProductFlagsUpdate",
    "ProductQuantityUpdate",
    "SalesSummaryDTO",
    "StoreDTO",
    "StoreSettingsUpdate",
]
