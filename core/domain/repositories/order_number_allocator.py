"""Interface of the durable order number counter."""

from abc import ABC, abstractmethod


class OrderNumberAllocator(ABC):
    """
    Issues strictly increasing order numbers from a durable counter.

    The counter lives in the database and is shared by every store and
    every server process. Gaps are allowed, duplicates are not.
    """

    @abstractmethod
    async def ensure(self) -> None:
        """Create the counter if missing. Never resets an existing one."""
        pass

    @abstractmethod
    async def next(self) -> int:
        """Atomically increment the counter and return the new value.

        Raises:
            AllocationError: If the counter is unreachable or missing
        """
        pass
