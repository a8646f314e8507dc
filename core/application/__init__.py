"""Application layer - services and DTOs."""

from .dtos import (
    CheckoutRequest,
    CheckoutResponse,
    OrderDTO,
    OrderItemDTO,
    OrderListDTO,
    SalesSummaryDTO,
)
from .services import (
    CheckoutService,
    OrderApplicationService,
    OrderNumberBackfill,
    OrderStreamService,
    ProductAdminService,
    SalesService,
)

__all__ = [
    # DTOs
    "CheckoutRequest",
    "CheckoutResponse",
    "OrderDTO",
    "OrderItemDTO",
    "OrderListDTO",
    "SalesSummaryDTO",
    # Services
    "CheckoutService",
    "OrderApplicationService",
    "OrderNumberBackfill",
    "OrderStreamService",
    "ProductAdminService",
    "SalesService",
]
