"""Application service for product administration."""

import logging

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.product_dto import ProductDTO, ProductFlagsUpdate
from core.data.uow import UnitOfWork, create_uow
from core.domain.entities.product import Product
from core.domain.exceptions import ItemFailure, ProductNotFound, ProductUpdateRejected


logger = logging.getLogger(__name__)


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        store_id=product.store_id,
        name=product.name,
        price=product.price,
        quantity=product.quantity,
        category_id=product.category_id,
        is_featured=product.is_featured,
        is_archived=product.is_archived,
    )


class ProductAdminService:
    """Admin edits that bypass checkout: flag toggles and stock corrections."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def set_flags(self, store_id: str, product_id: str, update: ProductFlagsUpdate) -> ProductDTO:
        """Toggle featured/archived.

        Raises:
            ProductNotFound: Unknown product in this store
            ProductUpdateRejected: Both flags set
        """
        async with create_uow(self._session_factory) as uow:
            product = await self._load(uow, store_id, product_id)
            try:
                product.set_flags(update.is_featured, update.is_archived)
            except ValueError as e:
                raise ProductUpdateRejected(str(e)) from e

            await uow.products.update(product)
            await uow.commit()
            logger.info(
                f"[{uow.execution_id}] Product {product_id} flags: "
                f"featured={product.is_featured} archived={product.is_archived}"
            )

        return product_to_dto(product)

    async def set_quantity(self, store_id: str, product_id: str, quantity: int) -> ProductDTO:
        """Overwrite the stock count.

        Raises:
            ProductNotFound: Unknown product in this store
            ProductUpdateRejected: Negative quantity
        """
        if quantity < 0:
            raise ProductUpdateRejected("Quantity must be a non-negative number")

        async with create_uow(self._session_factory) as uow:
            product = await self._load(uow, store_id, product_id)
            previous = product.quantity
            product.quantity = quantity

            await uow.products.update(product)
            await uow.commit()
            logger.info(f"[{uow.execution_id}] Product {product_id} quantity {previous} -> {quantity}")

        return product_to_dto(product)

    @staticmethod
    async def _load(uow: UnitOfWork, store_id: str, product_id: str) -> Product:
        product = await uow.products.get(store_id, product_id)
        if product is None:
            raise ProductNotFound(
                ItemFailure(reason="not_found", requested_product_id=product_id, store_id=store_id)
            )
        return product
