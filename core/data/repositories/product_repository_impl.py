"""SQLAlchemy implementation of ProductRepository."""

from typing import List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities.product import Product
from core.domain.repositories.product_repository import ProductRepository

from ..mappers import ProductMapper
from ..models.store_model import ProductModel


class SqlAlchemyProductRepository(ProductRepository):
    """Concrete implementation of ProductRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, store_id: str, product_id: str) -> Optional[Product]:
        model = await self._get_model(store_id, product_id)
        return ProductMapper.to_domain(model) if model else None

    async def find_live_by_ids(self, store_id: str, product_ids: List[str]) -> List[Product]:
        if not product_ids:
            return []

        result = await self._session.execute(
            select(ProductModel).where(
                ProductModel.store_id == store_id,
                ProductModel.id.in_(product_ids),
                ProductModel.is_archived.is_(False),
            )
        )
        return [ProductMapper.to_domain(model) for model in result.scalars().all()]

    async def find_live_by_name(self, store_id: str, name: str) -> Optional[Product]:
        wanted = name.strip().lower()
        if not wanted:
            return None

        result = await self._session.execute(
            select(ProductModel)
            .where(
                ProductModel.store_id == store_id,
                func.lower(ProductModel.name) == wanted,
                ProductModel.is_archived.is_(False),
            )
            .order_by(ProductModel.created_at.asc())
            .limit(1)
        )
        model = result.scalar_one_or_none()
        return ProductMapper.to_domain(model) if model else None

    async def decrement_stock(self, product_id: str, quantity: int) -> bool:
        """
        Conditional decrement.

        The guard is evaluated by the database at write time, so of two
        racing checkouts only one can take the last units.
        """
        result = await self._session.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id, ProductModel.quantity >= quantity)
            .values(quantity=ProductModel.quantity - quantity)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    async def get_quantity(self, product_id: str) -> int:
        result = await self._session.execute(
            select(ProductModel.quantity).where(ProductModel.id == product_id)
        )
        value = result.scalar_one_or_none()
        return int(value or 0)

    async def update(self, product: Product) -> None:
        model = await self._get_model(product.store_id, product.id)
        if model is None:
            raise LookupError(f"Product {product.id} disappeared during update")

        ProductMapper.update_persistence(product, model)
        await self._session.flush()

    async def _get_model(self, store_id: str, product_id: str) -> Optional[ProductModel]:
        result = await self._session.execute(
            select(ProductModel).where(
                ProductModel.id == product_id, ProductModel.store_id == store_id
            )
        )
        return result.scalar_one_or_none()
