"""
Domain exceptions for checkout and order administration.

Every exception carries structured details so callers can react
programmatically instead of parsing messages.
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ItemFailure:
    """Why a single requested checkout line could not be fulfilled."""

    reason: str  # "not_found" | "insufficient"
    requested_product_id: str
    requested_name: Optional[str] = None
    resolved_product_id: Optional[str] = None
    available: int = 0
    store_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class CheckoutError(Exception):
    """Base class for all checkout failures."""
    pass


class InvalidRequest(CheckoutError):
    """Malformed checkout input (missing product id, non-positive quantity)."""
    pass


class StoreNotFound(CheckoutError):
    """Raised when the referenced store does not exist."""

    def __init__(self, store_id: str):
        super().__init__(f"Store not found: {store_id}")
        self.store_id = store_id


class MethodInactive(CheckoutError):
    """Requested payment/shipping method is unknown or not active."""

    kind = "method"

    def __init__(self, store_id: str, method: str):
        super().__init__(f"{self.kind.capitalize()} method not active or not found: {method}")
        self.store_id = store_id
        self.method = method


class PaymentMethodInactive(MethodInactive):
    kind = "payment"


class ShippingMethodInactive(MethodInactive):
    kind = "shipping"


class ProductNotFound(CheckoutError):
    """A requested item could not be resolved to a live product."""

    def __init__(self, failure: ItemFailure):
        super().__init__(f"Product not found: {failure.requested_product_id}")
        self.failure = failure


class InsufficientStock(CheckoutError):
    """Requested quantity exceeds the product's stock."""

    def __init__(self, failure: ItemFailure):
        super().__init__(
            f"Insufficient stock for product {failure.resolved_product_id}: "
            f"available={failure.available}"
        )
        self.failure = failure


class ItemsUnavailable(CheckoutError):
    """
    One or more items failed resolution or the stock check.

    Holds every failing item, not just the first one.
    """

    def __init__(self, errors: List[CheckoutError]):
        self.errors = errors
        self.failures: List[ItemFailure] = [e.failure for e in errors]
        super().__init__(f"{len(self.failures)} item(s) unavailable")


class AllocationError(Exception):
    """Order number sequence unreachable or could not be created."""
    pass


class OrderNotFound(Exception):
    """Raised when an order does not exist within the given store."""

    def __init__(self, store_id: str, order_id: str):
        super().__init__(f"Order {order_id} not found for store {store_id}")
        self.store_id = store_id
        self.order_id = order_id


class ProductUpdateRejected(ValueError):
    """Invalid admin update to a product (flags, stock)."""
    pass
