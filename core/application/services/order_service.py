"""Application service for Order administration."""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.order_dto import OrderDTO, OrderItemDTO, OrderListDTO
from core.data.uow import create_uow
from core.domain.entities.order import Order
from core.domain.exceptions import OrderNotFound


logger = logging.getLogger(__name__)


def order_to_dto(order: Order) -> OrderDTO:
    """Transform Order domain entity to OrderDTO.

    Args:
        order: Order domain entity

    Returns:
        OrderDTO instance
    """
    return OrderDTO(
        id=order.id,
        order_number=order.order_number,
        store_id=order.store_id,
        total=order.total,
        customer_name=order.customer_name,
        address=order.address,
        payment_method=order.payment_method,
        created_at=order.created_at,
        items=[
            OrderItemDTO(
                product_id=item.product_id,
                name=item.name,
                price=item.price,
                quantity=item.quantity,
            )
            for item in order.items
        ],
    )


class OrderApplicationService:
    """
    Application service for store-scoped order reads and deletes.

    Every lookup is scoped to the store: an order id of another store
    behaves exactly like an unknown id.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize order application service.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory

    async def get_order(self, store_id: str, order_id: str) -> OrderDTO:
        """Get one order of a store.

        Raises:
            OrderNotFound: Unknown id or owned by another store
        """
        async with create_uow(self._session_factory) as uow:
            order = await uow.orders.find_by_id(store_id, order_id)

        if order is None:
            raise OrderNotFound(store_id, order_id)

        return order_to_dto(order)

    async def list_orders(self, store_id: str, limit: int = 100) -> OrderListDTO:
        """List a store's orders, newest first."""
        async with create_uow(self._session_factory) as uow:
            orders = await uow.orders.list_for_store(store_id, limit=limit)

        dtos = [order_to_dto(order) for order in orders]
        return OrderListDTO(orders=dtos, total=len(dtos))

    async def delete_order(self, store_id: str, order_id: str) -> None:
        """Delete an order and its items.

        Raises:
            OrderNotFound: Unknown id or owned by another store
        """
        async with create_uow(self._session_factory) as uow:
            deleted = await uow.orders.delete(store_id, order_id)
            if not deleted:
                raise OrderNotFound(store_id, order_id)
            await uow.commit()
            logger.info(f"[{uow.execution_id}] Deleted order {order_id} of store {store_id}")

    async def orders_created_after(
        self, store_id: str, since: datetime, after_id: Optional[str] = None, limit: int = 20
    ) -> List[OrderDTO]:
        """Orders of a store past the `(since, after_id)` cursor, oldest first."""
        async with create_uow(self._session_factory) as uow:
            orders = await uow.orders.find_created_after(store_id, since, after_id=after_id, limit=limit)

        return [order_to_dto(order) for order in orders]
