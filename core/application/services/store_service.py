"""Application service for store checkout settings."""

import logging

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.store_dto import CheckoutMethodDTO, StoreDTO, StoreSettingsUpdate
from core.data.uow import create_uow
from core.domain.entities.store import Store
from core.domain.exceptions import StoreNotFound
from core.domain.value_objects import CheckoutMethod


logger = logging.getLogger(__name__)


def _method_to_dto(method: CheckoutMethod) -> CheckoutMethodDTO:
    return CheckoutMethodDTO(method=method.method, label=method.label, status=method.status.value)


def store_to_dto(store: Store) -> StoreDTO:
    return StoreDTO(
        id=store.id,
        name=store.name,
        payment_methods=[_method_to_dto(m) for m in store.payment_methods],
        shipping_methods=[_method_to_dto(m) for m in store.shipping_methods],
    )


class StoreSettingsService:
    """Reads and updates the configuration checkout validates against."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def get_store(self, store_id: str) -> StoreDTO:
        """
        Raises:
            StoreNotFound: Unknown store
        """
        async with create_uow(self._session_factory) as uow:
            store = await uow.stores.find_by_id(store_id)

        if store is None:
            raise StoreNotFound(store_id)
        return store_to_dto(store)

    async def update_store(self, store_id: str, update: StoreSettingsUpdate) -> StoreDTO:
        """Rename the store and replace the method lists that were sent.

        Raises:
            StoreNotFound: Unknown store
        """
        async with create_uow(self._session_factory) as uow:
            store = await uow.stores.update_settings(
                store_id,
                name=update.name,
                payment_methods=update.payment_methods,
                shipping_methods=update.shipping_methods,
            )
            if store is None:
                raise StoreNotFound(store_id)
            await uow.commit()
            logger.info(
                f"[{uow.execution_id}] Store {store_id} settings updated: "
                f"{len(store.payment_methods)} payment, {len(store.shipping_methods)} shipping method(s)"
            )

        return store_to_dto(store)
