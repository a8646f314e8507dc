"""
Set a product's stock directly.

Usage:
    python -m scripts.set_product_quantity <storeId> <productId> <quantity>
"""
import asyncio
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from core.application.services.product_service import ProductAdminService  # noqa: E402
from core.domain.exceptions import ProductNotFound, ProductUpdateRejected  # noqa: E402
from core.infrastructure.database.config import close_database, get_session_factory  # noqa: E402
from core.infrastructure.logging import configure_logging  # noqa: E402


logger = logging.getLogger(__name__)


async def set_product_quantity(store_id: str, product_id: str, quantity: int) -> int:
    try:
        product = await ProductAdminService(get_session_factory()).set_quantity(
            store_id, product_id, quantity
        )
        logger.info(f"✅ {product.name} ({product.id}) quantity is now {product.quantity}")
        return 0
    except (ProductNotFound, ProductUpdateRejected) as e:
        logger.error(f"❌ {e}")
        return 1
    finally:
        await close_database()


def main(argv: list[str]) -> int:
    if len(argv) != 3:
        logger.error("Usage: python -m scripts.set_product_quantity <storeId> <productId> <quantity>")
        return 2

    store_id, product_id, raw_quantity = argv
    try:
        quantity = int(raw_quantity)
    except ValueError:
        logger.error(f"Quantity must be an integer, got {raw_quantity!r}")
        return 2

    return asyncio.run(set_product_quantity(store_id, product_id, quantity))


if __name__ == "__main__":
    configure_logging()
    sys.exit(main(sys.argv[1:]))
