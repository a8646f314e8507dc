"""Checkout endpoint for REST API."""

import logging

from fastapi import APIRouter, Depends

from core.application.dtos.checkout_dto import CheckoutRequest, CheckoutResponse
from core.application.services.checkout_service import CheckoutService

from apps.api.deps import get_checkout_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/checkout", tags=["checkout"])


@router.post("", response_model=CheckoutResponse)
async def checkout(
    request: CheckoutRequest,
    service: CheckoutService = Depends(get_checkout_service),
) -> CheckoutResponse:
    """Validate a cart and place the order.

    With `validateOnly` every check runs but nothing is written.
    Failures are rendered by the registered exception handlers:
    item problems as `400 {ok: false, failed: [...]}`, everything
    else as `{ok: false, error: ...}`.

    Args:
        request: CheckoutRequest DTO
        service: CheckoutService instance

    Returns:
        CheckoutResponse with the created order
    """
    return await service.checkout(request)
