"""Repository interface for stores."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..entities.store import Store


class StoreRepository(ABC):
    """Access to store configuration."""

    @abstractmethod
    async def find_by_id(self, store_id: str) -> Optional[Store]:
        """Retrieve a store with its normalized checkout methods."""
        pass

    @abstractmethod
    async def update_settings(
        self,
        store_id: str,
        name: str,
        payment_methods: Optional[List[Any]] = None,
        shipping_methods: Optional[List[Any]] = None,
    ) -> Optional[Store]:
        """Rename a store and replace its method lists.

        Lists are stored as given; None leaves the stored list untouched.

        Returns:
            Updated store, or None if it does not exist
        """
        pass
