"""Integration tests for order, product and sales administration endpoints."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient


@pytest.mark.asyncio
async def test_list_and_get_orders(test_client: TestClient, make_store, make_order):
    store_id = await make_store()
    older = await make_order(store_id, created_at=datetime(2024, 1, 1))
    newer = await make_order(store_id, created_at=datetime(2024, 2, 1))

    listing = test_client.get(f"/api/v1/stores/{store_id}/orders")
    assert listing.status_code == 200
    assert [order["id"] for order in listing.json()["orders"]] == [newer, older]
    assert listing.json()["total"] == 2

    single = test_client.get(f"/api/v1/stores/{store_id}/orders/{older}")
    assert single.status_code == 200
    assert single.json()["ok"] is True
    assert single.json()["order"]["id"] == older
    assert single.json()["order"]["storeId"] == store_id


@pytest.mark.asyncio
async def test_order_of_other_store_is_404(test_client: TestClient, make_store, make_order):
    store_id = await make_store()
    other_store_id = await make_store(name="Warung Sore")
    order_id = await make_order(store_id)

    response = test_client.get(f"/api/v1/stores/{other_store_id}/orders/{order_id}")

    assert response.status_code == 404
    assert response.json()["error"] == "order_not_found"


@pytest.mark.asyncio
async def test_delete_order(test_client: TestClient, make_store, make_order):
    store_id = await make_store()
    order_id = await make_order(store_id)

    deleted = test_client.delete(f"/api/v1/stores/{store_id}/orders/{order_id}")
    assert deleted.status_code == 200
    assert deleted.json() == {"ok": True, "id": order_id}

    assert test_client.get(f"/api/v1/stores/{store_id}/orders/{order_id}").status_code == 404
    assert test_client.delete(f"/api/v1/stores/{store_id}/orders/{order_id}").status_code == 404


@pytest.mark.asyncio
async def test_patch_product_flags(test_client: TestClient, make_store, make_product):
    store_id = await make_store()
    product_id = await make_product(store_id, is_archived=True)
    url = f"/api/v1/stores/{store_id}/products/{product_id}/flags"

    response = test_client.patch(url, json={"isFeatured": True, "isArchived": False})
    assert response.status_code == 200
    assert response.json()["isFeatured"] is True
    assert response.json()["isArchived"] is False

    both = test_client.patch(url, json={"isFeatured": True, "isArchived": True})
    assert both.status_code == 400

    not_bool = test_client.patch(url, json={"isFeatured": "yes", "isArchived": False})
    assert not_bool.status_code == 400
    assert not_bool.json()["error"] == "invalid_request"


@pytest.mark.asyncio
async def test_put_product_quantity(test_client: TestClient, make_store, make_product, product_quantity):
    store_id = await make_store()
    product_id = await make_product(store_id, quantity=10)
    url = f"/api/v1/stores/{store_id}/products/{product_id}/quantity"

    response = test_client.put(url, json={"quantity": 4})
    assert response.status_code == 200
    assert response.json()["quantity"] == 4
    assert await product_quantity(product_id) == 4

    assert test_client.put(url, json={"quantity": -1}).status_code == 400
    assert await product_quantity(product_id) == 4


@pytest.mark.asyncio
async def test_unknown_product_is_404(test_client: TestClient, make_store):
    store_id = await make_store()

    response = test_client.put(f"/api/v1/stores/{store_id}/products/missing/quantity", json={"quantity": 1})

    assert response.status_code == 404
    assert response.json()["error"] == "product_not_found"


@pytest.mark.asyncio
async def test_sales_summary(test_client: TestClient, make_store, make_order):
    store_id = await make_store()
    await make_order(store_id, total="1000", created_at=datetime(2024, 1, 31, 20, 0))
    await make_order(store_id, total="750", created_at=datetime(2024, 3, 1, 9, 0))

    response = test_client.get(
        f"/api/v1/stores/{store_id}/sales/summary", params={"from": "2024-01-01", "to": "2024-03-31"}
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert [month["month"] for month in data] == ["2024-01", "2024-02", "2024-03"]
    assert [month["count"] for month in data] == [1, 0, 1]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "params",
    [
        {"from": "2024-05-01", "to": "2024-01-01"},
        {"from": "yesterday"},
    ],
)
async def test_sales_summary_bad_range(test_client: TestClient, make_store, params):
    store_id = await make_store()

    response = test_client.get(f"/api/v1/stores/{store_id}/sales/summary", params=params)

    assert response.status_code == 400
    assert response.json()["ok"] is False


@pytest.mark.asyncio
async def test_health(test_client: TestClient):
    assert test_client.get("/health").json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_get_store_settings(test_client: TestClient, make_store):
    store_id = await make_store()

    response = test_client.get(f"/api/v1/stores/{store_id}")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == store_id
    assert body["paymentMethods"][0] == {"method": "transfer", "label": "Bank Transfer", "status": "Active"}
    assert body["shippingMethods"][1]["status"] == "Inactive"


@pytest.mark.asyncio
async def test_patch_store_settings(test_client: TestClient, make_store):
    store_id = await make_store()
    url = f"/api/v1/stores/{store_id}"

    response = test_client.patch(
        url,
        json={"name": "Jajanan Pagi", "shippingMethods": [{"method": "sicepat", "status": "Aktif"}]},
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Jajanan Pagi"
    assert response.json()["shippingMethods"] == [{"method": "sicepat", "label": "sicepat", "status": "Active"}]
    assert test_client.get(url).json()["shippingMethods"][0]["method"] == "sicepat"
    assert len(test_client.get(url).json()["paymentMethods"]) == 2


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"paymentMethods": []},
        {"name": "   "},
        {"name": "Toko", "paymentMethods": '[{"method": "cod", "status": "Active"}]'},
    ],
)
async def test_patch_store_settings_rejects_bad_payload(test_client: TestClient, make_store, payload):
    store_id = await make_store()

    response = test_client.patch(f"/api/v1/stores/{store_id}", json=payload)

    assert response.status_code == 400
    assert response.json()["error"] == "invalid_request"


@pytest.mark.asyncio
async def test_unknown_store_settings_is_404(test_client: TestClient):
    assert test_client.get("/api/v1/stores/no-such-store").status_code == 404

    response = test_client.patch("/api/v1/stores/no-such-store", json={"name": "Toko"})
    assert response.status_code == 404
    assert response.json()["error"] == "store_not_found"
