"""
Fill missing order numbers.

Assigns a number to every order created before order numbering
existed, oldest first, using the same counter as checkout. Safe to
re-run and safe to run while checkouts are happening.

Usage:
    DB_DATABASE_URL=postgresql+asyncpg://... python -m scripts.fill_order_numbers
"""
import asyncio
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from core.application.services.backfill_service import OrderNumberBackfill  # noqa: E402
from core.infrastructure.database.config import (  # noqa: E402
    close_database,
    get_session_factory,
    init_database,
)
from core.infrastructure.logging import configure_logging  # noqa: E402
from core.settings import get_app_settings  # noqa: E402


logger = logging.getLogger(__name__)


async def fill_order_numbers() -> int:
    settings = get_app_settings()

    try:
        await init_database()
        backfill = OrderNumberBackfill(
            get_session_factory(),
            sequence_name=settings.orders.sequence_name,
            batch_size=settings.orders.backfill_batch_size,
        )
        result = await backfill.run()
        logger.info(
            f"Processed {result.processed} of {result.missing} order(s): "
            f"assigned={result.assigned} skipped={result.skipped}"
        )
        return 0
    except Exception as e:
        logger.error(f"❌ Backfill failed: {e}", exc_info=True)
        return 1
    finally:
        await close_database()


if __name__ == "__main__":
    configure_logging()
    sys.exit(asyncio.run(fill_order_numbers()))
