"""
Live order notifications as server-sent events.

The stream polls the database rather than subscribing to anything, so
it works the same with any number of server processes.
"""
import asyncio
import logging
from datetime import datetime
from typing import AsyncIterator, Awaitable, Callable, Optional

from sqlalchemy.exc import SQLAlchemyError

from core.application.services.order_service import OrderApplicationService
from core.domain.value_objects import utcnow


logger = logging.getLogger(__name__)

# Initial comment frame so clients see the connection open immediately
KEEPALIVE_FRAME = ":ok\n\n"


class OrderStreamService:
    """Emits each new order of a store once, as an SSE `data:` frame."""

    def __init__(
        self,
        orders: OrderApplicationService,
        poll_interval: float = 2.0,
        batch_size: int = 20,
    ) -> None:
        self._orders = orders
        self._poll_interval = poll_interval
        self._batch_size = batch_size

    async def stream(
        self,
        store_id: str,
        is_disconnected: Callable[[], Awaitable[bool]],
        since: Optional[datetime] = None,
    ) -> AsyncIterator[str]:
        """
        Yield SSE frames until the client disconnects.

        Args:
            store_id: Store whose orders are watched
            is_disconnected: Awaitable check, e.g. `request.is_disconnected`
            since: Baseline; defaults to now so history is not replayed
        """
        last_seen = since or utcnow()
        last_id: Optional[str] = None
        yield KEEPALIVE_FRAME

        while not await is_disconnected():
            try:
                orders = await self._orders.orders_created_after(
                    store_id, last_seen, after_id=last_id, limit=self._batch_size
                )
            except SQLAlchemyError as e:
                # Keep the connection; the next poll retries
                logger.warning(f"Order stream poll failed for store {store_id}: {e}")
                orders = []

            for order in orders:
                yield f"data: {order.model_dump_json(by_alias=True)}\n\n"
                last_seen = order.created_at
                last_id = order.id

            if len(orders) < self._batch_size:
                await asyncio.sleep(self._poll_interval)
