"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from ..entities.order import Order


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def add(self, order: Order) -> None:
        """Insert a new order together with its items."""
        pass

    @abstractmethod
    async def find_by_id(self, store_id: str, order_id: str) -> Optional[Order]:
        """Retrieve an order owned by the given store.

        Args:
            store_id: Owning store
            order_id: Opaque order id

        Returns:
            Order if found in that store, None otherwise
        """
        pass

    @abstractmethod
    async def list_for_store(self, store_id: str, limit: int = 100) -> List[Order]:
        """List a store's orders, newest first."""
        pass

    @abstractmethod
    async def find_created_after(
        self, store_id: str, since: datetime, after_id: Optional[str] = None, limit: int = 20
    ) -> List[Order]:
        """Orders of a store past the `(since, after_id)` cursor, ordered by (created_at, id).

        Without `after_id` every order created at exactly `since` is skipped.
        """
        pass

    @abstractmethod
    async def find_created_between(
        self, store_id: str, start: datetime, end: datetime
    ) -> List[Order]:
        """Orders of a store with start <= created_at <= end."""
        pass

    @abstractmethod
    async def delete(self, store_id: str, order_id: str) -> bool:
        """Delete an order and its items.

        Returns:
            True if a row was deleted
        """
        pass

    @abstractmethod
    async def count_missing_order_numbers(self) -> int:
        """Count orders whose order number was never assigned."""
        pass

    @abstractmethod
    async def find_missing_order_numbers(self, limit: int = 100) -> List[str]:
        """Ids of the oldest orders still lacking an order number."""
        pass

    @abstractmethod
    async def assign_order_number(self, order_id: str, order_number: int) -> bool:
        """Set the order number only if it is still unset.

        Returns:
            True if assigned, False if another writer got there first
        """
        pass
