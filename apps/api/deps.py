"""FastAPI dependencies for dependency injection."""

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Load .env once, before any settings section is instantiated
load_dotenv()

from core.application.services.checkout_service import CheckoutService  # noqa: E402
from core.application.services.order_service import OrderApplicationService  # noqa: E402
from core.application.services.order_stream_service import OrderStreamService  # noqa: E402
from core.application.services.product_service import ProductAdminService  # noqa: E402
from core.application.services.sales_service import SalesService  # noqa: E402
from core.application.services.store_service import StoreSettingsService  # noqa: E402
from core.infrastructure.database import config as database  # noqa: E402
from core.settings import get_app_settings  # noqa: E402


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get SQLAlchemy session factory.

    Returns:
        async_sessionmaker instance
    """
    return database.get_session_factory()


def get_checkout_service() -> CheckoutService:
    settings = get_app_settings()
    return CheckoutService(get_session_factory(), sequence_name=settings.orders.sequence_name)


def get_order_service() -> OrderApplicationService:
    """Get OrderApplicationService instance.

    Returns:
        OrderApplicationService instance
    """
    return OrderApplicationService(get_session_factory())


def get_order_stream_service() -> OrderStreamService:
    settings = get_app_settings()
    return OrderStreamService(
        OrderApplicationService(get_session_factory()),
        poll_interval=settings.orders.stream_poll_interval,
        batch_size=settings.orders.stream_batch_size,
    )


def get_product_service() -> ProductAdminService:
    return ProductAdminService(get_session_factory())


def get_sales_service() -> SalesService:
    return SalesService(get_session_factory())


def get_store_service() -> StoreSettingsService:
    return StoreSettingsService(get_session_factory())
