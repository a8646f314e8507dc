"""SQLAlchemy implementation of OrderRepository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities.order import Order
from core.domain.repositories.order_repository import OrderRepository

from ..mappers import OrderMapper
from ..models.order_model import OrderModel


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def add(self, order: Order) -> None:
        """Insert order and items.

        Args:
            order: Order domain aggregate
        """
        self._session.add(OrderMapper.to_persistence(order))
        await self._session.flush()  # Propagate to DB without committing

    async def find_by_id(self, store_id: str, order_id: str) -> Optional[Order]:
        model = await self._get_model(store_id, order_id)
        if not model:
            return None
        return OrderMapper.to_domain(model)

    async def list_for_store(self, store_id: str, limit: int = 100) -> List[Order]:
        result = await self._session.execute(
            select(OrderModel)
            .where(OrderModel.store_id == store_id)
            .order_by(OrderModel.created_at.desc(), OrderModel.order_number.desc())
            .limit(limit)
        )
        return [OrderMapper.to_domain(model) for model in result.scalars().all()]

    async def find_created_after(
        self, store_id: str, since: datetime, after_id: Optional[str] = None, limit: int = 20
    ) -> List[Order]:
        past_cursor = OrderModel.created_at > since
        if after_id is not None:
            # Orders sharing the cursor timestamp are split by id
            past_cursor = or_(past_cursor, and_(OrderModel.created_at == since, OrderModel.id > after_id))

        result = await self._session.execute(
            select(OrderModel)
            .where(OrderModel.store_id == store_id, past_cursor)
            .order_by(OrderModel.created_at.asc(), OrderModel.id.asc())
            .limit(limit)
        )
        return [OrderMapper.to_domain(model) for model in result.scalars().all()]

    async def find_created_between(
        self, store_id: str, start: datetime, end: datetime
    ) -> List[Order]:
        result = await self._session.execute(
            select(OrderModel)
            .where(
                OrderModel.store_id == store_id,
                OrderModel.created_at >= start,
                OrderModel.created_at <= end,
            )
            .order_by(OrderModel.created_at.asc())
        )
        return [OrderMapper.to_domain(model) for model in result.scalars().all()]

    async def delete(self, store_id: str, order_id: str) -> bool:
        """Delete order; items go with it through the ORM cascade."""
        model = await self._get_model(store_id, order_id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def count_missing_order_numbers(self) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(OrderModel).where(OrderModel.order_number.is_(None))
        )
        return int(result.scalar_one())

    async def find_missing_order_numbers(self, limit: int = 100) -> List[str]:
        result = await self._session.execute(
            select(OrderModel.id)
            .where(OrderModel.order_number.is_(None))
            .order_by(OrderModel.created_at.asc(), OrderModel.id.asc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def assign_order_number(self, order_id: str, order_number: int) -> bool:
        """Compare-and-set: only rows whose number is still NULL are touched."""
        result = await self._session.execute(
            update(OrderModel)
            .where(OrderModel.id == order_id, OrderModel.order_number.is_(None))
            .values(order_number=order_number)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    async def _get_model(self, store_id: str, order_id: str) -> Optional[OrderModel]:
        result = await self._session.execute(
            select(OrderModel).where(
                OrderModel.id == order_id, OrderModel.store_id == store_id
            )
        )
        return result.scalar_one_or_none()
