"""
Order number backfill.

Gives every order created before numbering existed a number from the
same counter checkout uses. Each row gets its own reservation and its
own short compare-and-set transaction, so the job can run while the
store keeps taking orders and can be re-run safely.
"""
import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.data.uow import UnitOfWork, create_uow


logger = logging.getLogger(__name__)


@dataclass
class BackfillResult:
    """Counters reported at the end of a backfill run."""
    missing: int = 0
    assigned: int = 0
    skipped: int = 0

    @property
    def processed(self) -> int:
        return self.assigned + self.skipped


class OrderNumberBackfill:
    """Assigns order numbers to orders that lack one, oldest first."""

    def __init__(
        self,
        session_factory: async_sessionmaker,
        sequence_name: str = "order_number_seq",
        batch_size: int = 100,
    ) -> None:
        self._session_factory = session_factory
        self._sequence_name = sequence_name
        self._batch_size = batch_size

    def _uow(self) -> UnitOfWork:
        return create_uow(self._session_factory, self._sequence_name)

    async def run(self) -> BackfillResult:
        """
        Run until no order is left without a number.

        Raises:
            AllocationError: The counter could not be ensured or advanced
            SQLAlchemyError: Any other database failure aborts the run
        """
        result = BackfillResult()

        async with self._uow() as uow:
            await uow.order_numbers.ensure()
            await uow.commit()
            result.missing = await uow.orders.count_missing_order_numbers()

        if result.missing == 0:
            logger.info("No orders without order number, nothing to do")
            return result

        logger.info(f"Found {result.missing} order(s) without order number")

        while True:
            async with self._uow() as uow:
                batch = await uow.orders.find_missing_order_numbers(limit=self._batch_size)

            if not batch:
                break

            for order_id in batch:
                if await self._fill(order_id):
                    result.assigned += 1
                else:
                    result.skipped += 1

            logger.info(f"Progress: {result.processed}/{result.missing}")

        logger.info(
            f"✅ Backfill finished: assigned={result.assigned} skipped={result.skipped}"
        )
        return result

    async def _fill(self, order_id: str) -> bool:
        async with self._uow() as uow:
            number = await uow.order_numbers.next()
            await uow.commit()

        async with self._uow() as uow:
            assigned = await uow.orders.assign_order_number(order_id, number)
            await uow.commit()

        if assigned:
            logger.debug(f"[{uow.execution_id}] Order {order_id} -> {number}")
        else:
            # Numbered concurrently; the reserved value is discarded
            logger.info(f"Order {order_id} already numbered, skipped (discarded {number})")
        return assigned
