"""Unit of Work pattern for atomic transactions."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.value_objects import ExecutionID

from .repositories.order_number_allocator_impl import SqlAlchemyOrderNumberAllocator
from .repositories.order_repository_impl import SqlAlchemyOrderRepository
from .repositories.product_repository_impl import SqlAlchemyProductRepository
from .repositories.store_repository_impl import SqlAlchemyStoreRepository


logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Propagate ExecutionID across all operations
    3. Atomic commit/rollback of all repository operations
    4. Lazy initialization of repositories

    Usage:
        async with create_uow(session_factory) as uow:
            number = await uow.order_numbers.next()
            await uow.orders.add(order)
            await uow.commit()

    Nothing is committed implicitly: leaving the block without `commit()`
    discards the work, and leaving it with an exception rolls it back.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        sequence_name: str = "order_number_seq",
    ) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
            sequence_name: Order number sequence used by `order_numbers`
        """
        self._session_factory = session_factory
        self._sequence_name = sequence_name
        self._session: Optional[AsyncSession] = None
        self._execution_id: Optional[ExecutionID] = None

        # Lazy-loaded repositories
        self._order_repository: Optional[SqlAlchemyOrderRepository] = None
        self._product_repository: Optional[SqlAlchemyProductRepository] = None
        self._store_repository: Optional[SqlAlchemyStoreRepository] = None
        self._allocator: Optional[SqlAlchemyOrderNumberAllocator] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        self._execution_id = ExecutionID.generate()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception, always close the session."""
        try:
            if exc_type is not None:
                logger.warning(f"[{self._execution_id}] Transaction rolled back: {exc_val!r}")
                await self._session.rollback()
        finally:
            await self._session.close()

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def execution_id(self) -> ExecutionID:
        """Get current execution ID for tracing.

        Returns:
            ExecutionID value object
        """
        if self._execution_id is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._execution_id

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        """Lazy-load order repository."""
        if self._order_repository is None:
            self._order_repository = SqlAlchemyOrderRepository(self.session)
        return self._order_repository

    @property
    def products(self) -> SqlAlchemyProductRepository:
        """Lazy-load product repository."""
        if self._product_repository is None:
            self._product_repository = SqlAlchemyProductRepository(self.session)
        return self._product_repository

    @property
    def stores(self) -> SqlAlchemyStoreRepository:
        """Lazy-load store repository."""
        if self._store_repository is None:
            self._store_repository = SqlAlchemyStoreRepository(self.session)
        return self._store_repository

    @property
    def order_numbers(self) -> SqlAlchemyOrderNumberAllocator:
        """Lazy-load the order number allocator bound to this transaction."""
        if self._allocator is None:
            self._allocator = SqlAlchemyOrderNumberAllocator(self.session, self._sequence_name)
        return self._allocator

    async def commit(self) -> None:
        """Commit all pending changes."""
        await self.session.commit()

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        await self.session.rollback()


def create_uow(
    session_factory: async_sessionmaker, sequence_name: str = "order_number_seq"
) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory
        sequence_name: Order number sequence name

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory, sequence_name)
