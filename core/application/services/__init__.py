"""Application services."""
from .backfill_service import BackfillResult, OrderNumberBackfill
from .checkout_service import CheckoutPlan, CheckoutService
from .order_service import OrderApplicationService
from .order_stream_service import OrderStreamService
from .product_service import ProductAdminService
from .sales_service import SalesService
from .store_service import StoreSettingsService

__all__ = [
    "BackfillResult",
    "CheckoutPlan",
    "CheckoutService",
    "OrderApplicationService",
    "OrderNumberBackfill",
    "OrderStreamService",
    "ProductAdminService",
    "SalesService",
    "StoreSettingsService",
]
