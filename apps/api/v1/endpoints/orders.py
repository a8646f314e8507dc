"""Order endpoints for REST API."""

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import StreamingResponse

from core.application.dtos.order_dto import OrderListDTO, OrderResponse
from core.application.services.order_service import OrderApplicationService
from core.application.services.order_stream_service import OrderStreamService

from apps.api.deps import get_order_service, get_order_stream_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/stores/{store_id}/orders", tags=["orders"])


@router.get("", response_model=OrderListDTO)
async def list_orders(
    store_id: str,
    limit: int = Query(default=100, ge=1, le=1000, description="Maximum number of orders"),
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderListDTO:
    """List a store's orders, newest first.

    Args:
        store_id: Store ID
        limit: Maximum number of orders to return
        service: OrderApplicationService instance

    Returns:
        OrderListDTO with orders and their items
    """
    return await service.list_orders(store_id, limit=limit)


@router.get("/stream")
async def stream_orders(
    store_id: str,
    request: Request,
    stream: OrderStreamService = Depends(get_order_stream_service),
) -> StreamingResponse:
    """Server-sent events with every order created after connecting."""
    logger.info(f"Order stream opened for store {store_id}")
    return StreamingResponse(
        stream.stream(store_id, request.is_disconnected),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "Connection": "keep-alive"},
    )


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    store_id: str,
    order_id: str,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderResponse:
    """Get order by ID.

    Raises:
        OrderNotFound: Rendered as 404, also for another store's order
    """
    order = await service.get_order(store_id, order_id)
    return OrderResponse(order=order)


@router.delete("/{order_id}")
async def delete_order(
    store_id: str,
    order_id: str,
    service: OrderApplicationService = Depends(get_order_service),
) -> dict:
    await service.delete_order(store_id, order_id)
    return {"ok": True, "id": order_id}
