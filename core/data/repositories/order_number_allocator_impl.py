"""
Order number allocator backed by the database.

PostgreSQL uses a native SEQUENCE: `nextval` is atomic across sessions
and never hands out a value twice, even when the reserving transaction
rolls back (the value is simply lost).

SQLite has no sequences, so a single counter row is incremented with
`UPDATE ... SET value = value + 1` inside the caller's transaction. The
write lock taken by the UPDATE serializes concurrent allocators.
"""
import logging

from sqlalchemy import Sequence, select, text, update
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.schema import CreateSequence

from core.domain.exceptions import AllocationError
from core.domain.repositories.order_number_allocator import OrderNumberAllocator

from ..models.order_model import OrderNumberCounterModel


logger = logging.getLogger(__name__)


class SqlAlchemyOrderNumberAllocator(OrderNumberAllocator):
    """Durable, concurrency-safe order number counter."""

    def __init__(self, session: AsyncSession, sequence_name: str = "order_number_seq") -> None:
        """
        Args:
            session: Session whose transaction the allocation joins
            sequence_name: Name of the sequence (or counter row)
        """
        self._session = session
        self._sequence = Sequence(sequence_name, start=1)

    @property
    def sequence_name(self) -> str:
        return self._sequence.name

    @property
    def _dialect(self) -> str:
        return self._session.get_bind().dialect.name

    async def ensure(self) -> None:
        try:
            if self._dialect == "postgresql":
                await self._ensure_sequence()
            elif self._dialect == "sqlite":
                await self._ensure_counter_row()
            else:
                raise AllocationError(
                    f"Order numbers are not supported on dialect {self._dialect!r}"
                )
        except SQLAlchemyError as e:
            logger.error(f"❌ Could not ensure order number sequence {self.sequence_name}: {e}")
            raise AllocationError(f"Could not ensure sequence {self.sequence_name}") from e

    async def next(self) -> int:
        try:
            if self._dialect == "postgresql":
                value = await self._session.scalar(select(self._sequence.next_value()))
            else:
                value = await self._increment_counter_row()
        except SQLAlchemyError as e:
            logger.error(f"❌ Order number allocation failed: {e}")
            raise AllocationError(f"Could not allocate from {self.sequence_name}") from e

        if value is None:
            raise AllocationError(f"Sequence {self.sequence_name} returned no value")

        return int(value)

    async def _ensure_sequence(self) -> None:
        # Savepoint: a concurrent CREATE may still collide in the catalog
        try:
            async with self._session.begin_nested():
                await self._session.execute(CreateSequence(self._sequence, if_not_exists=True))
        except SQLAlchemyError as e:
            logger.warning(f"Concurrent creation of {self.sequence_name}, re-checking: {e}")
            exists = await self._session.scalar(
                text("SELECT to_regclass(:name)::text"), {"name": self.sequence_name}
            )
            if exists is None:
                raise

    async def _ensure_counter_row(self) -> None:
        await self._session.execute(
            sqlite_insert(OrderNumberCounterModel)
            .values(name=self.sequence_name, value=0)
            .on_conflict_do_nothing(index_elements=["name"])
        )

    async def _increment_counter_row(self) -> int:
        result = await self._session.execute(
            update(OrderNumberCounterModel)
            .where(OrderNumberCounterModel.name == self.sequence_name)
            .values(value=OrderNumberCounterModel.value + 1)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            raise AllocationError(f"Order number counter {self.sequence_name} does not exist")

        return await self._session.scalar(
            select(OrderNumberCounterModel.value).where(
                OrderNumberCounterModel.name == self.sequence_name
            )
        )
