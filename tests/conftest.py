"""Shared fixtures: in-memory database and seed helpers."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from core.data.models import Base, OrderItemModel, OrderModel, ProductModel, StoreModel


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

DEFAULT_PAYMENT_METHODS = [
    {"method": "transfer", "label": "Bank Transfer", "status": "Active"},
    {"method": "cod", "label": "Cash on Delivery", "status": "Nonaktif"},
]
DEFAULT_SHIPPING_METHODS = [
    {"method": "jne", "label": "JNE Reguler", "status": "Aktif"},
    {"method": "pickup", "label": "Ambil di Toko", "status": "Inactive"},
]


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine):
    """Create test session factory."""
    yield async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def make_store(session_factory):
    """Insert a store and return its id."""

    async def _make_store(
        name: str = "Jajanan Subuh",
        payment_methods=DEFAULT_PAYMENT_METHODS,
        shipping_methods=DEFAULT_SHIPPING_METHODS,
    ) -> str:
        async with session_factory() as session:
            store = StoreModel(
                id=str(uuid4()),
                name=name,
                payment_methods=payment_methods,
                shipping_methods=shipping_methods,
            )
            session.add(store)
            await session.commit()
            return store.id

    return _make_store


@pytest.fixture
def make_product(session_factory):
    """Insert a product and return its id."""

    async def _make_product(
        store_id: str,
        name: str = "Nasi Uduk",
        price: str = "1000",
        quantity: int = 10,
        is_featured: bool = False,
        is_archived: bool = False,
    ) -> str:
        async with session_factory() as session:
            product = ProductModel(
                id=str(uuid4()),
                store_id=store_id,
                name=name,
                price=Decimal(price),
                quantity=quantity,
                is_featured=is_featured,
                is_archived=is_archived,
            )
            session.add(product)
            await session.commit()
            return product.id

    return _make_product


@pytest.fixture
def make_order(session_factory):
    """Insert an order directly, bypassing checkout (legacy and report data)."""

    async def _make_order(
        store_id: str,
        total: str = "1000",
        created_at: Optional[datetime] = None,
        order_number: Optional[int] = None,
        quantity: int = 1,
    ) -> str:
        async with session_factory() as session:
            order = OrderModel(
                id=str(uuid4()),
                store_id=store_id,
                total=Decimal(total),
                order_number=order_number,
                created_at=created_at or datetime(2024, 1, 15, 8, 0, 0),
            )
            order.items = [
                OrderItemModel(
                    product_id=str(uuid4()),
                    name="Lontong Sayur",
                    price=Decimal(total) / quantity,
                    quantity=quantity,
                )
            ]
            session.add(order)
            await session.commit()
            return order.id

    return _make_order


@pytest.fixture
def product_quantity(session_factory):
    """Read a product's stock straight from the table."""

    async def _product_quantity(product_id: str) -> int:
        async with session_factory() as session:
            return await session.scalar(
                select(ProductModel.quantity).where(ProductModel.id == product_id)
            )

    return _product_quantity


@pytest.fixture
def all_orders(session_factory):
    """Every stored order row."""

    async def _all_orders() -> List[OrderModel]:
        async with session_factory() as session:
            result = await session.execute(select(OrderModel).order_by(OrderModel.created_at))
            return list(result.scalars().all())

    return _all_orders
