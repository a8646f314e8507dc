"""Store-scoped order administration and the live order stream."""

import json
from datetime import datetime

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from core.application.services.order_service import OrderApplicationService
from core.application.services.order_stream_service import KEEPALIVE_FRAME, OrderStreamService
from core.data.models import OrderItemModel
from core.domain.exceptions import OrderNotFound


def _disconnect_after(polls: int):
    """is_disconnected stand-in that lets `polls` loop iterations run."""
    calls = {"count": 0}

    async def is_disconnected() -> bool:
        calls["count"] += 1
        return calls["count"] > polls

    return is_disconnected


@pytest.mark.asyncio
async def test_list_orders_newest_first(session_factory, make_store, make_order):
    store_id = await make_store()
    other_store_id = await make_store(name="Warung Sore")
    older = await make_order(store_id, created_at=datetime(2024, 1, 1))
    newer = await make_order(store_id, created_at=datetime(2024, 2, 1))
    await make_order(other_store_id, created_at=datetime(2024, 3, 1))

    listing = await OrderApplicationService(session_factory).list_orders(store_id)

    assert listing.total == 2
    assert [order.id for order in listing.orders] == [newer, older]
    assert all(order.items for order in listing.orders)


@pytest.mark.asyncio
async def test_get_order_is_scoped_to_store(session_factory, make_store, make_order):
    store_id = await make_store()
    other_store_id = await make_store(name="Warung Sore")
    order_id = await make_order(store_id, total="2500")
    service = OrderApplicationService(session_factory)

    order = await service.get_order(store_id, order_id)
    assert order.id == order_id

    with pytest.raises(OrderNotFound):
        await service.get_order(other_store_id, order_id)


@pytest.mark.asyncio
async def test_delete_order_removes_items(session_factory, make_store, make_order):
    store_id = await make_store()
    order_id = await make_order(store_id, quantity=2)
    service = OrderApplicationService(session_factory)

    await service.delete_order(store_id, order_id)

    with pytest.raises(OrderNotFound):
        await service.get_order(store_id, order_id)

    async with session_factory() as session:
        remaining = await session.scalar(select(func.count()).select_from(OrderItemModel))
    assert remaining == 0


@pytest.mark.asyncio
async def test_delete_order_of_other_store_is_not_found(session_factory, make_store, make_order):
    store_id = await make_store()
    other_store_id = await make_store(name="Warung Sore")
    order_id = await make_order(store_id)
    service = OrderApplicationService(session_factory)

    with pytest.raises(OrderNotFound):
        await service.delete_order(other_store_id, order_id)

    assert (await service.get_order(store_id, order_id)).id == order_id


@pytest.mark.asyncio
async def test_stream_emits_only_orders_after_baseline(session_factory, make_store, make_order):
    store_id = await make_store()
    other_store_id = await make_store(name="Warung Sore")
    await make_order(store_id, created_at=datetime(2023, 12, 31))
    first = await make_order(store_id, created_at=datetime(2024, 2, 1))
    second = await make_order(store_id, created_at=datetime(2024, 3, 1))
    await make_order(other_store_id, created_at=datetime(2024, 2, 15))

    stream = OrderStreamService(OrderApplicationService(session_factory), poll_interval=0.01)
    frames = [
        frame
        async for frame in stream.stream(store_id, _disconnect_after(1), since=datetime(2024, 1, 1))
    ]

    assert frames[0] == KEEPALIVE_FRAME
    payloads = [json.loads(frame[len("data: "):]) for frame in frames[1:]]
    assert [payload["id"] for payload in payloads] == [first, second]
    assert all(frame.endswith("\n\n") for frame in frames)
    assert "orderNumber" in payloads[0]


@pytest.mark.asyncio
async def test_stream_does_not_repeat_orders(session_factory, make_store, make_order):
    store_id = await make_store()
    await make_order(store_id, created_at=datetime(2024, 2, 1))

    stream = OrderStreamService(OrderApplicationService(session_factory), poll_interval=0.01)
    frames = [
        frame
        async for frame in stream.stream(store_id, _disconnect_after(3), since=datetime(2024, 1, 1))
    ]

    assert len(frames) == 2


@pytest.mark.asyncio
async def test_stream_emits_orders_sharing_a_timestamp_across_full_batches(
    session_factory, make_store, make_order
):
    store_id = await make_store()
    same_moment = datetime(2024, 2, 1, 9, 30)
    first = await make_order(store_id, created_at=same_moment)
    second = await make_order(store_id, created_at=same_moment)

    stream = OrderStreamService(OrderApplicationService(session_factory), poll_interval=0.01, batch_size=1)
    frames = [
        frame
        async for frame in stream.stream(store_id, _disconnect_after(3), since=datetime(2024, 1, 1))
    ]

    payloads = [json.loads(frame[len("data: "):]) for frame in frames[1:]]
    assert [payload["id"] for payload in payloads] == sorted([first, second])


class _FlakyOrders:
    """Fails the first poll, then returns nothing."""

    def __init__(self):
        self.calls = 0

    async def orders_created_after(self, store_id, since, after_id=None, limit=20):
        self.calls += 1
        if self.calls == 1:
            raise OperationalError("SELECT", {}, Exception("database is locked"))
        return []


@pytest.mark.asyncio
async def test_stream_survives_poll_errors():
    orders = _FlakyOrders()
    stream = OrderStreamService(orders, poll_interval=0.01)

    frames = [frame async for frame in stream.stream("store-1", _disconnect_after(2))]

    assert frames == [KEEPALIVE_FRAME]
    assert orders.calls == 2
