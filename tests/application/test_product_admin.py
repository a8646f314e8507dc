"""Product flag toggles and direct stock corrections."""

import pytest

from core.application.dtos.product_dto import ProductFlagsUpdate
from core.application.services.product_service import ProductAdminService
from core.domain.exceptions import ProductNotFound, ProductUpdateRejected


@pytest.mark.asyncio
async def test_featuring_an_archived_product_unarchives_it(session_factory, make_store, make_product):
    store_id = await make_store()
    product_id = await make_product(store_id, is_archived=True)
    service = ProductAdminService(session_factory)

    product = await service.set_flags(
        store_id, product_id, ProductFlagsUpdate(is_featured=True, is_archived=False)
    )

    assert product.is_featured is True
    assert product.is_archived is False


@pytest.mark.asyncio
async def test_both_flags_rejected(session_factory, make_store, make_product):
    store_id = await make_store()
    product_id = await make_product(store_id, is_featured=True)
    service = ProductAdminService(session_factory)

    with pytest.raises(ProductUpdateRejected):
        await service.set_flags(store_id, product_id, ProductFlagsUpdate(is_featured=True, is_archived=True))


@pytest.mark.asyncio
async def test_set_quantity(session_factory, make_store, make_product, product_quantity):
    store_id = await make_store()
    product_id = await make_product(store_id, quantity=10)
    service = ProductAdminService(session_factory)

    product = await service.set_quantity(store_id, product_id, 25)

    assert product.quantity == 25
    assert await product_quantity(product_id) == 25


@pytest.mark.asyncio
async def test_negative_quantity_rejected(session_factory, make_store, make_product, product_quantity):
    store_id = await make_store()
    product_id = await make_product(store_id, quantity=10)

    with pytest.raises(ProductUpdateRejected):
        await ProductAdminService(session_factory).set_quantity(store_id, product_id, -1)

    assert await product_quantity(product_id) == 10


@pytest.mark.asyncio
async def test_product_of_other_store_is_not_found(session_factory, make_store, make_product):
    store_id = await make_store()
    other_store_id = await make_store(name="Warung Sore")
    product_id = await make_product(store_id)

    with pytest.raises(ProductNotFound):
        await ProductAdminService(session_factory).set_quantity(other_store_id, product_id, 3)
