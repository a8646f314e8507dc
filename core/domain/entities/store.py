"""Store entity."""
from dataclasses import dataclass, field
from typing import List, Optional

from ..value_objects import CheckoutMethod, find_method


@dataclass
class Store:
    """Tenant store with its checkout configuration."""
    id: str
    name: str
    user_id: Optional[str] = None
    payment_methods: List[CheckoutMethod] = field(default_factory=list)
    shipping_methods: List[CheckoutMethod] = field(default_factory=list)

    def active_payment_method(self, requested: str) -> Optional[CheckoutMethod]:
        """Return the matching payment method if it is active."""
        method = find_method(self.payment_methods, requested)
        return method if method and method.is_active else None

    def active_shipping_method(self, requested: str) -> Optional[CheckoutMethod]:
        """Return the matching shipping method if it is active."""
        method = find_method(self.shipping_methods, requested)
        return method if method and method.is_active else None
