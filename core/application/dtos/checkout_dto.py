"""Application DTOs for checkout."""

from typing import List, Optional

from pydantic import ConfigDict, Field

from .base import CamelModel
from .order_dto import OrderDTO


class CheckoutItemRequest(CamelModel):
    """
    One requested cart line.

    Missing ids and non-positive quantities pass parsing; the checkout
    service rejects them as InvalidRequest.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True, str_strip_whitespace=True)

    product_id: str = Field(default="", description="Product id")
    quantity: int = Field(default=0, description="Requested quantity")
    name: Optional[str] = Field(None, description="Fallback lookup key when the id is unknown")


class CheckoutRequest(CamelModel):
    """Request DTO for a checkout."""

    store_id: str = Field(..., description="Store the order belongs to")
    items: List[CheckoutItemRequest] = Field(default_factory=list)
    customer_name: Optional[str] = None
    address: Optional[str] = None
    payment_method: Optional[str] = None
    shipping_method: Optional[str] = None
    validate_only: bool = Field(default=False, description="Dry run: check everything, change nothing")


class CheckoutFailureDTO(CamelModel):
    """A requested item that could not be fulfilled."""

    reason: str = Field(..., description="not_found | insufficient")
    requested_product_id: str
    requested_name: Optional[str] = None
    resolved_product_id: Optional[str] = None
    available: int = 0
    store_id: Optional[str] = None


class CheckoutResponse(CamelModel):
    """Checkout outcome."""

    ok: bool
    order: Optional[OrderDTO] = None
    validated: Optional[bool] = None
    failed: List[CheckoutFailureDTO] = Field(default_factory=list)
