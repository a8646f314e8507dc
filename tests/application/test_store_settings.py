"""Store settings: the method lists checkout validates against."""

import pytest
from sqlalchemy import select

from core.application.dtos.checkout_dto import CheckoutItemRequest, CheckoutRequest
from core.application.dtos.store_dto import StoreSettingsUpdate
from core.application.services.checkout_service import CheckoutService
from core.application.services.store_service import StoreSettingsService
from core.data.models import StoreModel
from core.domain.exceptions import PaymentMethodInactive, StoreNotFound


@pytest.mark.asyncio
async def test_get_store_returns_normalized_methods(session_factory, make_store):
    store_id = await make_store()

    store = await StoreSettingsService(session_factory).get_store(store_id)

    assert store.name == "Jajanan Subuh"
    assert [(m.method, m.label, m.status) for m in store.payment_methods] == [
        ("transfer", "Bank Transfer", "Active"),
        ("cod", "Cash on Delivery", "Inactive"),
    ]
    assert [m.status for m in store.shipping_methods] == ["Active", "Inactive"]


@pytest.mark.asyncio
async def test_update_replaces_sent_lists_and_keeps_omitted_ones(session_factory, make_store):
    store_id = await make_store()
    service = StoreSettingsService(session_factory)

    updated = await service.update_store(
        store_id,
        StoreSettingsUpdate(
            name="  Jajanan Pagi ",
            payment_methods=[{"method": "qris", "label": "QRIS", "status": "Aktif"}],
        ),
    )

    assert updated.name == "Jajanan Pagi"
    assert [m.method for m in updated.payment_methods] == ["qris"]
    assert [m.method for m in updated.shipping_methods] == ["jne", "pickup"]

    async with session_factory() as session:
        stored = await session.scalar(select(StoreModel.payment_methods).where(StoreModel.id == store_id))
    assert stored == [{"method": "qris", "label": "QRIS", "status": "Aktif"}]


@pytest.mark.asyncio
async def test_checkout_follows_updated_methods(session_factory, make_store, make_product):
    store_id = await make_store()
    product_id = await make_product(store_id)
    checkout = CheckoutService(session_factory)
    request = CheckoutRequest(
        store_id=store_id,
        items=[CheckoutItemRequest(product_id=product_id, quantity=1)],
        payment_method="cod",
    )

    with pytest.raises(PaymentMethodInactive):
        await checkout.checkout(request)

    await StoreSettingsService(session_factory).update_store(
        store_id,
        StoreSettingsUpdate(
            name="Jajanan Subuh",
            payment_methods=[{"method": "cod", "label": "Cash on Delivery", "status": "Active"}],
        ),
    )

    assert (await checkout.checkout(request)).ok


@pytest.mark.asyncio
async def test_unknown_store(session_factory):
    service = StoreSettingsService(session_factory)

    with pytest.raises(StoreNotFound):
        await service.get_store("no-such-store")

    with pytest.raises(StoreNotFound):
        await service.update_store("no-such-store", StoreSettingsUpdate(name="Toko"))
