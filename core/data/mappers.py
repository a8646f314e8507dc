"""Static mappers for domain entities ↔ database models."""

from decimal import Decimal

from core.domain.entities import Order, OrderItem, Product, Store
from core.domain.value_objects import normalize_methods

from .models import OrderItemModel, OrderModel, ProductModel, StoreModel


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel) -> OrderItem:
        """Convert ORM model to domain entity.

        Args:
            model: OrderItemModel instance

        Returns:
            OrderItem domain entity
        """
        return OrderItem(
            product_id=model.product_id,
            name=model.name,
            price=Decimal(str(model.price)),
            quantity=model.quantity,
        )

    @staticmethod
    def to_persistence(entity: OrderItem, order_id: str) -> OrderItemModel:
        """Convert domain entity to ORM model.

        Args:
            entity: OrderItem domain entity
            order_id: Owning order id

        Returns:
            OrderItemModel instance
        """
        return OrderItemModel(
            order_id=order_id,
            product_id=entity.product_id,
            name=entity.name,
            price=entity.price,
            quantity=entity.quantity,
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested items).

        Args:
            model: OrderModel instance

        Returns:
            Order domain aggregate
        """
        items = [OrderItemMapper.to_domain(item_model) for item_model in model.items]

        return Order(
            id=model.id,
            store_id=model.store_id,
            items=items,
            total=Decimal(str(model.total)),
            order_number=model.order_number,
            customer_name=model.customer_name,
            address=model.address,
            payment_method=model.payment_method,
            created_at=model.created_at,
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (with nested items).

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        order_model = OrderModel(
            id=entity.id,
            order_number=entity.order_number,
            store_id=entity.store_id,
            total=entity.total,
            customer_name=entity.customer_name,
            address=entity.address,
            payment_method=entity.payment_method,
            created_at=entity.created_at,
        )

        order_model.items = [
            OrderItemMapper.to_persistence(item, entity.id) for item in entity.items
        ]

        return order_model


class ProductMapper:
    """Static mapper for Product ↔ ProductModel."""

    @staticmethod
    def to_domain(model: ProductModel) -> Product:
        # Stock is coerced to a strict int on read; NULL counts as empty
        return Product(
            id=model.id,
            store_id=model.store_id,
            name=model.name,
            price=Decimal(str(model.price)),
            quantity=max(int(model.quantity or 0), 0),
            category_id=model.category_id,
            is_featured=bool(model.is_featured),
            is_archived=bool(model.is_archived),
        )

    @staticmethod
    def update_persistence(entity: Product, model: ProductModel) -> ProductModel:
        """Copy admin-editable fields onto an existing row."""
        model.quantity = entity.quantity
        model.is_featured = entity.is_featured
        model.is_archived = entity.is_archived
        return model


class StoreMapper:
    """Static mapper for StoreModel → Store (read-only)."""

    @staticmethod
    def to_domain(model: StoreModel) -> Store:
        return Store(
            id=model.id,
            name=model.name,
            user_id=model.user_id,
            payment_methods=normalize_methods(model.payment_methods),
            shipping_methods=normalize_methods(model.shipping_methods),
        )
