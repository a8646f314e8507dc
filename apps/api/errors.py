"""Translate domain exceptions into JSON error responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.application.services.checkout_service import failures_to_dto
from core.domain.exceptions import (
    AllocationError,
    InsufficientStock,
    InvalidRequest,
    ItemFailure,
    ItemsUnavailable,
    MethodInactive,
    OrderNotFound,
    ProductNotFound,
    StoreNotFound,
)


logger = logging.getLogger(__name__)


def _error(status_code: int, error: str, **details) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({"ok": False, "error": error, **details}),
    )


def _failed(failures: list[ItemFailure]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "ok": False,
            "failed": [dto.model_dump(mode="json", by_alias=True) for dto in failures_to_dto(failures)],
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register every domain exception handler on the app."""

    @app.exception_handler(ItemsUnavailable)
    async def items_unavailable_handler(request: Request, exc: ItemsUnavailable) -> JSONResponse:
        return _failed(exc.failures)

    @app.exception_handler(InsufficientStock)
    async def insufficient_stock_handler(request: Request, exc: InsufficientStock) -> JSONResponse:
        # Stock lost to a concurrent checkout between validation and commit
        return _failed([exc.failure])

    @app.exception_handler(ProductNotFound)
    async def product_not_found_handler(request: Request, exc: ProductNotFound) -> JSONResponse:
        return _error(
            status.HTTP_404_NOT_FOUND,
            "product_not_found",
            detail=str(exc),
            productId=exc.failure.requested_product_id,
        )

    @app.exception_handler(InvalidRequest)
    async def invalid_request_handler(request: Request, exc: InvalidRequest) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, "invalid_request", detail=str(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, "invalid_request", detail=exc.errors())

    @app.exception_handler(StoreNotFound)
    async def store_not_found_handler(request: Request, exc: StoreNotFound) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, "store_not_found", storeId=exc.store_id)

    @app.exception_handler(MethodInactive)
    async def method_inactive_handler(request: Request, exc: MethodInactive) -> JSONResponse:
        return _error(
            status.HTTP_400_BAD_REQUEST,
            f"{exc.kind}_method_inactive",
            storeId=exc.store_id,
            method=exc.method,
        )

    @app.exception_handler(OrderNotFound)
    async def order_not_found_handler(request: Request, exc: OrderNotFound) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, "order_not_found", orderId=exc.order_id)

    @app.exception_handler(AllocationError)
    async def allocation_error_handler(request: Request, exc: AllocationError) -> JSONResponse:
        logger.error(f"Order number allocation failed on {request.url.path}: {exc}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "allocation_failed")

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        """Handle ValueError exceptions (bad dates, rejected product updates)."""
        return _error(status.HTTP_400_BAD_REQUEST, "invalid_request", detail=str(exc))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle general exceptions."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error", detail="Internal server error")
