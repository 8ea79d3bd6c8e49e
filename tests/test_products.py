"""Tests for the product endpoints."""

from decimal import Decimal

import pytest
from httpx import AsyncClient

from payloads import product_payload


async def _create(client: AsyncClient, name: str = "Widget", **overrides) -> dict:
    resp = await client.post("/api/products", json=product_payload(name, **overrides))
    assert resp.status_code == 201, resp.text
    return resp.json()


def _names(resp) -> list[str]:
    assert resp.status_code == 200, resp.text
    return [p["name"] for p in resp.json()]


@pytest.mark.asyncio
async def test_create_product_without_stock_is_out_of_stock(async_client: AsyncClient):
    """Widget at 9.99 with no stock and no status becomes OUT_OF_STOCK."""
    resp = await async_client.post(
        "/api/products", json={"name": "Widget", "price": 9.99, "stock_quantity": 0}
    )
    assert resp.status_code == 201
    data = resp.json()
    assert data["status"] == "OUT_OF_STOCK"
    assert data["category"] == "OTHER"
    assert Decimal(str(data["price"])) == Decimal("9.99")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"price": "0"},
        {"price": "-1"},
        {"stock_quantity": -1},
        {"name": ""},
        {"name": "x" * 201},
        {"description": "d" * 1001},
        {"category": "TOYS"},
    ],
)
async def test_create_product_validation_returns_400(async_client: AsyncClient, overrides: dict):
    resp = await async_client.post("/api/products", json=product_payload(**overrides))
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_get_product(async_client: AsyncClient):
    created = await _create(async_client)
    resp = await async_client.get(f"/api/products/{created['id']}")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Widget"

    missing = await async_client.get("/api/products/9999")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Product not found with ID: 9999"


@pytest.mark.asyncio
async def test_category_status_and_available_routes(async_client: AsyncClient):
    await _create(async_client, "Laptop", category="ELECTRONICS")
    await _create(async_client, "Radio", category="ELECTRONICS", stock_quantity=0)
    await _create(async_client, "Novel", category="BOOKS")

    assert _names(await async_client.get("/api/products")) == ["Laptop", "Radio", "Novel"]
    assert _names(await async_client.get("/api/products/category/BOOKS")) == ["Novel"]
    assert _names(await async_client.get("/api/products/status/OUT_OF_STOCK")) == ["Radio"]
    assert _names(await async_client.get("/api/products/available")) == ["Laptop", "Novel"]
    assert _names(await async_client.get("/api/products/available/category/ELECTRONICS")) == [
        "Laptop"
    ]


@pytest.mark.asyncio
async def test_search_and_price_routes(async_client: AsyncClient):
    await _create(async_client, "Cheap Mug", price="5.00", category="HOME")
    await _create(async_client, "Fancy Mug", price="25.00", category="HOME")
    await _create(async_client, "Book", price="25.00", category="BOOKS")

    assert _names(await async_client.get("/api/products/search", params={"name": "mug"})) == [
        "Cheap Mug",
        "Fancy Mug",
    ]
    assert len((await async_client.get("/api/products/search", params={"name": ""})).json()) == 3
    assert _names(await async_client.get("/api/products/price/max/5")) == ["Cheap Mug"]
    assert _names(await async_client.get("/api/products/price/min/25.00")) == ["Fancy Mug", "Book"]
    assert _names(
        await async_client.get("/api/products/price/range", params={"min_price": 1, "max_price": 25})
    ) == ["Cheap Mug", "Fancy Mug", "Book"]
    assert _names(
        await async_client.get(
            "/api/products/price/range/category/HOME",
            params={"min_price": "10", "max_price": "30"},
        )
    ) == ["Fancy Mug"]
    assert _names(await async_client.get("/api/products/most-expensive")) == ["Fancy Mug", "Book"]


@pytest.mark.asyncio
async def test_low_stock_and_recent_routes(async_client: AsyncClient):
    await _create(async_client, "Few", stock_quantity=2)
    await _create(async_client, "Plenty", stock_quantity=100)

    assert _names(await async_client.get("/api/products/low-stock")) == ["Few"]
    assert _names(await async_client.get("/api/products/recent")) == ["Few", "Plenty"]


@pytest.mark.asyncio
async def test_update_product(async_client: AsyncClient):
    created = await _create(async_client)
    resp = await async_client.put(
        f"/api/products/{created['id']}",
        json={"name": "Widget XL", "price": "19.99", "stock_quantity": 0, "status": "AVAILABLE"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "Widget XL"
    assert data["status"] == "OUT_OF_STOCK"
    assert data["category"] == "ELECTRONICS"

    missing = await async_client.put(
        "/api/products/9999", json={"name": "X", "price": "1", "stock_quantity": 1}
    )
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_patch_stock(async_client: AsyncClient):
    created = await _create(async_client, stock_quantity=0)

    resp = await async_client.patch(
        f"/api/products/{created['id']}/stock", params={"stock_quantity": 5}
    )
    assert resp.status_code == 200
    assert resp.json()["stock_quantity"] == 5
    assert resp.json()["status"] == "AVAILABLE"

    resp = await async_client.patch(
        f"/api/products/{created['id']}/stock", params={"stock_quantity": 0}
    )
    assert resp.json()["status"] == "OUT_OF_STOCK"

    missing = await async_client.patch("/api/products/9999/stock", params={"stock_quantity": 1})
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_delete_product(async_client: AsyncClient):
    created = await _create(async_client)

    assert (await async_client.delete(f"/api/products/{created['id']}")).status_code == 204
    assert (await async_client.get(f"/api/products/{created['id']}")).status_code == 404
    assert (await async_client.delete(f"/api/products/{created['id']}")).status_code == 404
