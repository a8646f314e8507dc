"""Monthly sales summary."""

from datetime import datetime
from decimal import Decimal

import pytest

from core.application.services.sales_service import (
    SalesService,
    default_range,
    iter_months,
    parse_timestamp,
)


def test_parse_timestamp_variants():
    assert parse_timestamp(None) is None
    assert parse_timestamp("  ") is None
    assert parse_timestamp("2024-01-31") == datetime(2024, 1, 31)
    assert parse_timestamp("2024-01-31", end_of_day=True) == datetime(2024, 1, 31, 23, 59, 59, 999999)
    assert parse_timestamp("2024-01-01T07:00:00+07:00") == datetime(2024, 1, 1, 0, 0)


def test_parse_timestamp_rejects_garbage():
    with pytest.raises(ValueError):
        parse_timestamp("last tuesday")


def test_months_cross_year_boundary():
    months = list(iter_months(datetime(2023, 11, 20), datetime(2024, 2, 3)))
    assert months == ["2023-11", "2023-12", "2024-01", "2024-02"]


def test_default_range_starts_five_months_back():
    start, end = default_range(datetime(2024, 3, 15, 10, 0))
    assert start == datetime(2023, 10, 1)
    assert end == datetime(2024, 3, 15, 10, 0)


@pytest.mark.asyncio
async def test_summary_is_zero_filled_and_store_scoped(session_factory, make_store, make_order):
    store_id = await make_store()
    other_store_id = await make_store(name="Warung Sore")
    await make_order(store_id, total="1000", created_at=datetime(2024, 1, 5))
    await make_order(store_id, total="2000", created_at=datetime(2024, 1, 28))
    await make_order(store_id, total="500", created_at=datetime(2024, 3, 10))
    await make_order(other_store_id, total="9999", created_at=datetime(2024, 1, 10))

    summary = await SalesService(session_factory).monthly_summary(
        store_id, start=datetime(2024, 1, 1), end=datetime(2024, 4, 30, 23, 59)
    )

    assert summary.ok is True
    assert [(m.month, m.revenue, m.count) for m in summary.data] == [
        ("2024-01", Decimal("3000"), 2),
        ("2024-02", Decimal("0"), 0),
        ("2024-03", Decimal("500"), 1),
        ("2024-04", Decimal("0"), 0),
    ]


@pytest.mark.asyncio
async def test_summary_rejects_inverted_range(session_factory):
    with pytest.raises(ValueError):
        await SalesService(session_factory).monthly_summary(
            "store-1", start=datetime(2024, 5, 1), end=datetime(2024, 1, 1)
        )


@pytest.mark.asyncio
async def test_default_summary_covers_six_months(session_factory, make_store):
    store_id = await make_store()

    summary = await SalesService(session_factory).monthly_summary(store_id)

    assert len(summary.data) == 6
    assert all(m.count == 0 for m in summary.data)
