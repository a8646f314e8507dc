"""
Checkout application service.

Turns a cart into an order in two phases:

1. prepare - validate input, store methods and stock. Read-only, so a
   failure here has no side effects. The stock check is advisory: it
   can be outdated by the time the order is placed.
2. place - one transaction that reserves an order number, decrements
   stock with a guarded UPDATE per item and inserts the order. If any
   decrement loses a race the whole transaction rolls back.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.checkout_dto import (
    CheckoutFailureDTO,
    CheckoutItemRequest,
    CheckoutRequest,
    CheckoutResponse,
)
from core.application.services.order_service import order_to_dto
from core.data.uow import UnitOfWork, create_uow
from core.domain.entities import Order, OrderItem, Product
from core.domain.exceptions import (
    CheckoutError,
    InsufficientStock,
    InvalidRequest,
    ItemFailure,
    ItemsUnavailable,
    PaymentMethodInactive,
    ProductNotFound,
    ShippingMethodInactive,
    StoreNotFound,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutLine:
    """A requested item resolved to a product, with the price seen at resolution."""
    product: Product
    quantity: int
    requested_product_id: str
    requested_name: Optional[str] = None

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class CheckoutPlan:
    """Everything `place` needs, produced by a successful `prepare`."""
    store_id: str
    lines: Tuple[CheckoutLine, ...]
    customer_name: Optional[str] = None
    address: Optional[str] = None
    payment_method: Optional[str] = None

    @property
    def total(self) -> Decimal:
        return sum((line.line_total for line in self.lines), Decimal("0"))


def failures_to_dto(failures: List[ItemFailure]) -> List[CheckoutFailureDTO]:
    return [CheckoutFailureDTO(**failure.to_dict()) for failure in failures]


class CheckoutService:
    """
    Application service for checkout.

    Responsibilities:
    - Validate requests before any I/O
    - Check store payment/shipping configuration
    - Resolve items to live products and check stock
    - Place the order atomically
    """

    def __init__(self, session_factory: async_sessionmaker, sequence_name: str = "order_number_seq") -> None:
        """Initialize checkout service.

        Args:
            session_factory: SQLAlchemy async session factory
            sequence_name: Order number sequence name
        """
        self._session_factory = session_factory
        self._sequence_name = sequence_name

    def _uow(self) -> UnitOfWork:
        return create_uow(self._session_factory, self._sequence_name)

    async def checkout(self, request: CheckoutRequest) -> CheckoutResponse:
        """Validate and, unless `validate_only`, place the order.

        Args:
            request: CheckoutRequest DTO

        Returns:
            CheckoutResponse with the created order

        Raises:
            CheckoutError: Validation failed or stock was lost to a race
            AllocationError: Order number could not be allocated
        """
        plan = await self.prepare(request)

        if request.validate_only:
            logger.info(f"Checkout validated for store {plan.store_id} ({len(plan.lines)} items), dry run")
            return CheckoutResponse(ok=True, validated=True)

        order = await self.place(plan)
        return CheckoutResponse(ok=True, order=order_to_dto(order))

    async def prepare(self, request: CheckoutRequest) -> CheckoutPlan:
        """Run every pre-transaction check and resolve the cart.

        Raises:
            InvalidRequest: Malformed input
            StoreNotFound: Unknown store
            PaymentMethodInactive: Payment method unknown or inactive
            ShippingMethodInactive: Shipping method unknown or inactive
            ItemsUnavailable: One or more items unresolved or short on stock
        """
        self._validate_request(request)

        async with self._uow() as uow:
            store = await uow.stores.find_by_id(request.store_id)
            if store is None:
                raise StoreNotFound(request.store_id)

            if request.payment_method and not store.active_payment_method(request.payment_method):
                logger.warning(
                    f"Payment method not active or not found for store {store.id}: {request.payment_method!r}"
                )
                raise PaymentMethodInactive(store.id, request.payment_method)

            if request.shipping_method and not store.active_shipping_method(request.shipping_method):
                logger.warning(
                    f"Shipping method not active or not found for store {store.id}: {request.shipping_method!r}"
                )
                raise ShippingMethodInactive(store.id, request.shipping_method)

            lines, errors = await self._resolve_items(uow, store.id, request.items)

        if errors:
            logger.info(f"Checkout rejected for store {request.store_id}: {len(errors)} item(s) unavailable")
            raise ItemsUnavailable(errors)

        return CheckoutPlan(
            store_id=request.store_id,
            lines=tuple(lines),
            customer_name=request.customer_name,
            address=request.address,
            payment_method=request.payment_method,
        )

    async def place(self, plan: CheckoutPlan) -> Order:
        """Reserve an order number, decrement stock and insert the order atomically.

        Raises:
            InsufficientStock: A concurrent checkout took the stock first
            AllocationError: Order number could not be allocated
        """
        async with self._uow() as uow:
            await uow.order_numbers.ensure()
            order_number = await uow.order_numbers.next()
            logger.info(f"[{uow.execution_id}] Reserved order number {order_number} for store {plan.store_id}")

            taken: Dict[str, int] = {}
            for line in plan.lines:
                if not await uow.products.decrement_stock(line.product.id, line.quantity):
                    # Report stock as it stands once this transaction rolls back
                    available = await uow.products.get_quantity(line.product.id) + taken.get(line.product.id, 0)
                    logger.warning(
                        f"[{uow.execution_id}] Stock race lost on product {line.product.id}: "
                        f"requested={line.quantity} available={available}"
                    )
                    raise InsufficientStock(
                        ItemFailure(
                            reason="insufficient",
                            requested_product_id=line.requested_product_id,
                            requested_name=line.requested_name,
                            resolved_product_id=line.product.id,
                            available=available,
                            store_id=line.product.store_id,
                        )
                    )
                taken[line.product.id] = taken.get(line.product.id, 0) + line.quantity

            order = Order.place(
                store_id=plan.store_id,
                items=[
                    OrderItem(
                        product_id=line.product.id,
                        name=line.product.name,
                        price=line.product.price,
                        quantity=line.quantity,
                    )
                    for line in plan.lines
                ],
                order_number=order_number,
                customer_name=plan.customer_name,
                address=plan.address,
                payment_method=plan.payment_method,
            )
            await uow.orders.add(order)
            await uow.commit()

            logger.info(
                f"[{uow.execution_id}] ✅ Order {order.id} placed: number={order.order_number} total={order.total}"
            )

        return order

    @staticmethod
    def _validate_request(request: CheckoutRequest) -> None:
        if not request.store_id or not request.store_id.strip():
            raise InvalidRequest("storeId is required")

        if not request.items:
            raise InvalidRequest("No items")

        for item in request.items:
            if not item.product_id:
                raise InvalidRequest("Invalid productId")
            if item.quantity <= 0:
                raise InvalidRequest(f"Invalid quantity for product {item.product_id}")

    @staticmethod
    async def _resolve_items(
        uow: UnitOfWork, store_id: str, items: List[CheckoutItemRequest]
    ) -> Tuple[List[CheckoutLine], List[CheckoutError]]:
        """
        Resolve by id first, then by case-insensitive name.

        Every item is checked so the caller learns about all failures
        at once. Lines resolving to the same product share its stock.
        """
        found = await uow.products.find_live_by_ids(store_id, [item.product_id for item in items])
        by_id = {product.id: product for product in found}

        lines: List[CheckoutLine] = []
        errors: List[CheckoutError] = []
        claimed: Dict[str, int] = {}

        for item in items:
            product = by_id.get(item.product_id)
            if product is None and item.name:
                product = await uow.products.find_live_by_name(store_id, item.name)
                if product is not None:
                    logger.info(f"Resolved {item.product_id!r} by name {item.name!r} to product {product.id}")

            if product is None:
                errors.append(
                    ProductNotFound(
                        ItemFailure(
                            reason="not_found",
                            requested_product_id=item.product_id,
                            requested_name=item.name,
                            store_id=store_id,
                        )
                    )
                )
                continue

            already_claimed = claimed.get(product.id, 0)
            if not product.has_stock_for(already_claimed + item.quantity):
                errors.append(
                    InsufficientStock(
                        ItemFailure(
                            reason="insufficient",
                            requested_product_id=item.product_id,
                            requested_name=item.name,
                            resolved_product_id=product.id,
                            available=max(product.quantity - already_claimed, 0),
                            store_id=product.store_id,
                        )
                    )
                )
                continue

            claimed[product.id] = already_claimed + item.quantity
            lines.append(
                CheckoutLine(
                    product=product,
                    quantity=item.quantity,
                    requested_product_id=item.product_id,
                    requested_name=item.name,
                )
            )

        return lines, errors
