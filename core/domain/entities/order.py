"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import uuid4

from ..value_objects import utcnow


@dataclass
class OrderItem:
    """
    Line item snapshot.

    Name and price are copied from the product at purchase time and never
    follow later product edits.
    """
    product_id: str
    name: str
    price: Decimal
    quantity: int

    def __post_init__(self):
        if not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))
        if self.quantity <= 0:
            raise ValueError(f"Order item quantity must be positive, got {self.quantity}")

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


@dataclass
class Order:
    """
    Order aggregate root.

    `id` is the opaque storage identity; `order_number` is the
    human-facing number drawn from the global order number sequence.
    """
    store_id: str
    items: List[OrderItem] = field(default_factory=list)
    total: Decimal = Decimal("0")
    id: str = field(default_factory=lambda: str(uuid4()))
    order_number: Optional[int] = None
    customer_name: Optional[str] = None
    address: Optional[str] = None
    payment_method: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow)

    @classmethod
    def place(
        cls,
        store_id: str,
        items: List[OrderItem],
        order_number: Optional[int] = None,
        customer_name: Optional[str] = None,
        address: Optional[str] = None,
        payment_method: Optional[str] = None,
    ) -> "Order":
        """Create a new order whose total is derived from its items."""
        if not items:
            raise ValueError("Cannot place an order without items")

        order = cls(
            store_id=store_id,
            items=list(items),
            order_number=order_number,
            customer_name=customer_name,
            address=address,
            payment_method=payment_method,
        )
        order.total = order.calculate_total()
        return order

    def calculate_total(self) -> Decimal:
        """Sum of price x quantity over all items."""
        return sum((item.line_total for item in self.items), Decimal("0"))
