"""Application DTOs for sales reporting."""

from decimal import Decimal
from typing import List

from pydantic import Field

from .base import CamelModel


class MonthlySalesDTO(CamelModel):
    """Revenue and order count of one calendar month."""

    month: str = Field(..., description="YYYY-MM")
    revenue: Decimal = Field(default=Decimal("0"))
    count: int = Field(default=0, ge=0)


class SalesSummaryDTO(CamelModel):
    """Monthly sales between two dates, zero-filled."""

    ok: bool = True
    data: List[MonthlySalesDTO] = Field(default_factory=list)
