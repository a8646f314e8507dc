"""Application DTOs for Order operations."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from .base import CamelModel


class OrderItemDTO(CamelModel):
    """DTO for order item."""

    product_id: str = Field(..., description="Product id at purchase time")
    name: str = Field(..., description="Product name snapshot")
    price: Decimal = Field(..., ge=0, description="Unit price snapshot")
    quantity: int = Field(..., gt=0, description="Quantity ordered")


class OrderDTO(CamelModel):
    """Response DTO for order details."""

    id: str = Field(..., description="Opaque order id")
    order_number: Optional[int] = Field(None, description="Human-facing order number")
    store_id: str = Field(..., description="Owning store")
    total: Decimal = Field(..., ge=0, description="Total order amount")
    customer_name: Optional[str] = None
    address: Optional[str] = None
    payment_method: Optional[str] = None
    created_at: datetime = Field(..., description="Creation time (UTC)")
    items: List[OrderItemDTO] = Field(default_factory=list, description="Order items")


class OrderListDTO(CamelModel):
    """DTO for listing orders."""

    orders: List[OrderDTO] = Field(default_factory=list, description="List of orders")
    total: int = Field(..., ge=0, description="Number of orders returned")


class OrderResponse(CamelModel):
    """Envelope for a single order."""

    ok: bool = True
    order: OrderDTO
