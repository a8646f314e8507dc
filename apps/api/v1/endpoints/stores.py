"""Store settings endpoints."""

from fastapi import APIRouter, Depends

from core.application.dtos.store_dto import StoreDTO, StoreSettingsUpdate
from core.application.services.store_service import StoreSettingsService

from apps.api.deps import get_store_service

router = APIRouter(prefix="/stores/{store_id}", tags=["stores"])


@router.get("", response_model=StoreDTO)
async def get_store(
    store_id: str,
    service: StoreSettingsService = Depends(get_store_service),
) -> StoreDTO:
    """Store name and normalized payment/shipping methods."""
    return await service.get_store(store_id)


@router.patch("", response_model=StoreDTO)
async def update_store(
    store_id: str,
    update: StoreSettingsUpdate,
    service: StoreSettingsService = Depends(get_store_service),
) -> StoreDTO:
    """Rename the store and replace its method lists.

    `name` is required; omitted lists keep their stored value.
    """
    return await service.update_store(store_id, update)
