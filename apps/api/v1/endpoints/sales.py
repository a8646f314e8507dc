"""Sales reporting endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from core.application.dtos.sales_dto import SalesSummaryDTO
from core.application.services.sales_service import SalesService, parse_timestamp

from apps.api.deps import get_sales_service

router = APIRouter(prefix="/stores/{store_id}/sales", tags=["sales"])


@router.get("/summary", response_model=SalesSummaryDTO)
async def sales_summary(
    store_id: str,
    date_from: Optional[str] = Query(default=None, alias="from", description="ISO date, inclusive"),
    date_to: Optional[str] = Query(default=None, alias="to", description="ISO date, inclusive"),
    service: SalesService = Depends(get_sales_service),
) -> SalesSummaryDTO:
    """Monthly revenue and order count.

    Unparsable dates and `from` after `to` raise ValueError (400).
    """
    return await service.monthly_summary(
        store_id,
        start=parse_timestamp(date_from),
        end=parse_timestamp(date_to, end_of_day=True),
    )
