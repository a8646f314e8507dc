"""Application DTOs for product administration."""

from decimal import Decimal
from typing import Optional

from pydantic import Field, StrictBool

from .base import CamelModel


class ProductFlagsUpdate(CamelModel):
    """Featured/archived toggle; both flags must be sent as booleans."""

    is_featured: StrictBool
    is_archived: StrictBool


class ProductQuantityUpdate(CamelModel):
    """Direct stock correction by an admin."""

    quantity: int = Field(..., ge=0)


class ProductDTO(CamelModel):
    """Response DTO for a product."""

    id: str
    store_id: str
    name: str
    price: Decimal
    quantity: int
    category_id: Optional[str] = None
    is_featured: bool
    is_archived: bool
