"""Product administration endpoints."""

from fastapi import APIRouter, Depends

from core.application.dtos.product_dto import ProductDTO, ProductFlagsUpdate, ProductQuantityUpdate
from core.application.services.product_service import ProductAdminService

from apps.api.deps import get_product_service

router = APIRouter(prefix="/stores/{store_id}/products", tags=["products"])


@router.patch("/{product_id}/flags", response_model=ProductDTO)
async def update_flags(
    store_id: str,
    product_id: str,
    update: ProductFlagsUpdate,
    service: ProductAdminService = Depends(get_product_service),
) -> ProductDTO:
    """Toggle featured/archived. A product cannot be both."""
    return await service.set_flags(store_id, product_id, update)


@router.put("/{product_id}/quantity", response_model=ProductDTO)
async def set_quantity(
    store_id: str,
    product_id: str,
    update: ProductQuantityUpdate,
    service: ProductAdminService = Depends(get_product_service),
) -> ProductDTO:
    return await service.set_quantity(store_id, product_id, update.quantity)
