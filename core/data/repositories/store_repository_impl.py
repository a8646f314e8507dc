"""SQLAlchemy implementation of StoreRepository."""

from typing import Any, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities.store import Store
from core.domain.repositories.store_repository import StoreRepository

from ..mappers import StoreMapper
from ..models.store_model import StoreModel


class SqlAlchemyStoreRepository(StoreRepository):
    """Concrete implementation of StoreRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, store_id: str) -> Optional[Store]:
        model = await self._session.get(StoreModel, store_id)
        if not model:
            return None
        return StoreMapper.to_domain(model)

    async def update_settings(
        self,
        store_id: str,
        name: str,
        payment_methods: Optional[List[Any]] = None,
        shipping_methods: Optional[List[Any]] = None,
    ) -> Optional[Store]:
        model = await self._session.get(StoreModel, store_id)
        if not model:
            return None

        model.name = name
        # JSON columns keep the structure; a JSON-encoded string would come back as a string
        if payment_methods is not None:
            model.payment_methods = list(payment_methods)
        if shipping_methods is not None:
            model.shipping_methods = list(shipping_methods)

        await self._session.flush()
        return StoreMapper.to_domain(model)
