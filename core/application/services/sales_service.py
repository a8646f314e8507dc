"""Application service for monthly sales reporting."""

from datetime import datetime, time, timezone
from decimal import Decimal
from typing import Dict, Iterator, Optional, Tuple

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.sales_dto import MonthlySalesDTO, SalesSummaryDTO
from core.data.uow import create_uow
from core.domain.value_objects import utcnow

# Default window: the current month and the five before it
DEFAULT_MONTHS_BACK = 5


def parse_timestamp(raw: Optional[str], end_of_day: bool = False) -> Optional[datetime]:
    """Parse an ISO date/datetime query value into naive UTC.

    A bare date means its first instant, or its last one with
    `end_of_day`, so a date range includes both boundary days.

    Raises:
        ValueError: Unparsable value
    """
    if raw is None or not raw.strip():
        return None

    raw = raw.strip()
    try:
        value = datetime.fromisoformat(raw)
    except ValueError as e:
        raise ValueError(f"Invalid date: {raw!r}") from e

    if end_of_day and len(raw) == 10:
        value = datetime.combine(value.date(), time.max)
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def month_key(value: datetime) -> str:
    return f"{value.year}-{value.month:02d}"


def _shift_months(year: int, month: int, delta: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def iter_months(start: datetime, end: datetime) -> Iterator[str]:
    """Yield YYYY-MM keys from start's month to end's month inclusive."""
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        yield f"{year}-{month:02d}"
        year, month = _shift_months(year, month, 1)


def default_range(now: datetime) -> Tuple[datetime, datetime]:
    year, month = _shift_months(now.year, now.month, -DEFAULT_MONTHS_BACK)
    return datetime(year, month, 1), now


class SalesService:
    """Aggregates order totals per calendar month for a store."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def monthly_summary(
        self,
        store_id: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> SalesSummaryDTO:
        """Revenue and order count per month, zero-filled.

        Raises:
            ValueError: start is after end
        """
        default_start, default_end = default_range(utcnow())
        start = start or default_start
        end = end or default_end
        if start > end:
            raise ValueError("Invalid date range: 'from' is after 'to'")

        async with create_uow(self._session_factory) as uow:
            orders = await uow.orders.find_created_between(store_id, start, end)

        buckets: Dict[str, MonthlySalesDTO] = {
            key: MonthlySalesDTO(month=key) for key in iter_months(start, end)
        }
        for order in orders:
            key = month_key(order.created_at)
            current = buckets[key]
            buckets[key] = MonthlySalesDTO(
                month=key,
                revenue=current.revenue + (order.total or Decimal("0")),
                count=current.count + 1,
            )

        return SalesSummaryDTO(data=list(buckets.values()))
