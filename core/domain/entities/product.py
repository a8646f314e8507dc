"""Product entity."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Product:
    """Sellable product of a store with its stock count."""
    id: str
    store_id: str
    name: str
    price: Decimal
    quantity: int = 0
    category_id: Optional[str] = None
    is_featured: bool = False
    is_archived: bool = False

    def __post_init__(self):
        if not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))
        if self.quantity < 0:
            raise ValueError(f"Product quantity cannot be negative, got {self.quantity}")

    def has_stock_for(self, requested: int) -> bool:
        return self.quantity >= requested

    def set_flags(self, is_featured: bool, is_archived: bool) -> None:
        """
        Business rule: featured and archived are mutually exclusive.

        Turning one on turns the other off.
        """
        if is_featured and is_archived:
            raise ValueError("A product cannot be both featured and archived")
        self.is_featured = is_featured
        self.is_archived = is_archived
