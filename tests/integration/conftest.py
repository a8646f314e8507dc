"""Pytest configuration and fixtures for integration tests."""

import pytest
from fastapi.testclient import TestClient

from apps.api.main import app
from core.application.services.checkout_service import CheckoutService
from core.application.services.order_service import OrderApplicationService
from core.application.services.product_service import ProductAdminService
from core.application.services.sales_service import SalesService
from core.application.services.store_service import StoreSettingsService


@pytest.fixture
def test_client(session_factory) -> TestClient:
    """Create FastAPI test client bound to the test database."""
    from apps.api.deps import (
        get_checkout_service,
        get_order_service,
        get_product_service,
        get_sales_service,
        get_store_service,
    )

    # Override dependencies
    app.dependency_overrides[get_checkout_service] = lambda: CheckoutService(session_factory)
    app.dependency_overrides[get_order_service] = lambda: OrderApplicationService(session_factory)
    app.dependency_overrides[get_product_service] = lambda: ProductAdminService(session_factory)
    app.dependency_overrides[get_sales_service] = lambda: SalesService(session_factory)
    app.dependency_overrides[get_store_service] = lambda: StoreSettingsService(session_factory)

    client = TestClient(app)
    yield client

    # Cleanup
    app.dependency_overrides.clear()
