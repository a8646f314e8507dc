"""Repository interface for products."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.product import Product


class ProductRepository(ABC):
    """Abstract repository for Product persistence."""

    @abstractmethod
    async def get(self, store_id: str, product_id: str) -> Optional[Product]:
        """Product of the store by id, archived or not."""
        pass

    @abstractmethod
    async def find_live_by_ids(self, store_id: str, product_ids: List[str]) -> List[Product]:
        """Non-archived products of the store with the given ids."""
        pass

    @abstractmethod
    async def find_live_by_name(self, store_id: str, name: str) -> Optional[Product]:
        """Non-archived product of the store whose name matches case-insensitively."""
        pass

    @abstractmethod
    async def decrement_stock(self, product_id: str, quantity: int) -> bool:
        """Atomically decrement stock if at least `quantity` is available.

        Returns:
            False when the guard failed and nothing was changed
        """
        pass

    @abstractmethod
    async def get_quantity(self, product_id: str) -> int:
        """Current stock of a product (0 if it no longer exists)."""
        pass

    @abstractmethod
    async def update(self, product: Product) -> None:
        """Persist admin edits (flags, stock) of an existing product."""
        pass
