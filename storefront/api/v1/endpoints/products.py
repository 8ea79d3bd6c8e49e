"""
Product CRUD + catalogue filter + stock patch endpoints.

Fixed paths are declared before ``/{product_id}``.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from fastapi import APIRouter, Depends, Query, Response, status

from storefront.api.v1.deps import get_product_manager
from storefront.models.product import Product, ProductCategory, ProductStatus
from storefront.schemas.product import ProductCreate, ProductRead, ProductUpdate
from storefront.services.product_manager import ProductManager

router = APIRouter(prefix="/products", tags=["products"])
logger = logging.getLogger(__name__)


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    body: ProductCreate,
    manager: ProductManager = Depends(get_product_manager),
) -> Product:
    """Create a product. Zero stock always yields OUT_OF_STOCK."""
    logger.info("POST /products - Creating product: %s", body.name)
    return await manager.create_product(body)


@router.get("", response_model=list[ProductRead])
async def list_products(manager: ProductManager = Depends(get_product_manager)) -> list[Product]:
    return list(await manager.list_products())


# ── Category / status ───────────────────────────────────────────────
@router.get("/category/{category}", response_model=list[ProductRead])
async def list_products_by_category(
    category: ProductCategory,
    manager: ProductManager = Depends(get_product_manager),
) -> list[Product]:
    return list(await manager.list_products_by_category(category))


@router.get("/status/{product_status}", response_model=list[ProductRead])
async def list_products_by_status(
    product_status: ProductStatus,
    manager: ProductManager = Depends(get_product_manager),
) -> list[Product]:
    return list(await manager.list_products_by_status(product_status))


@router.get("/available", response_model=list[ProductRead])
async def list_available_products(
    manager: ProductManager = Depends(get_product_manager),
) -> list[Product]:
    return list(await manager.list_available_products())


@router.get("/available/category/{category}", response_model=list[ProductRead])
async def list_available_products_by_category(
    category: ProductCategory,
    manager: ProductManager = Depends(get_product_manager),
) -> list[Product]:
    return list(await manager.list_available_products_by_category(category))


@router.get("/search", response_model=list[ProductRead])
async def search_products_by_name(
    name: str = Query(),
    manager: ProductManager = Depends(get_product_manager),
) -> list[Product]:
    return list(await manager.search_products_by_name(name))


# ── Price ───────────────────────────────────────────────────────────
@router.get("/price/max/{max_price}", response_model=list[ProductRead])
async def list_products_by_max_price(
    max_price: Decimal,
    manager: ProductManager = Depends(get_product_manager),
) -> list[Product]:
    return list(await manager.list_products_by_max_price(max_price))


@router.get("/price/min/{min_price}", response_model=list[ProductRead])
async def list_products_by_min_price(
    min_price: Decimal,
    manager: ProductManager = Depends(get_product_manager),
) -> list[Product]:
    return list(await manager.list_products_by_min_price(min_price))


@router.get("/price/range", response_model=list[ProductRead])
async def list_products_by_price_range(
    min_price: Decimal,
    max_price: Decimal,
    manager: ProductManager = Depends(get_product_manager),
) -> list[Product]:
    return list(await manager.list_products_by_price_range(min_price, max_price))


@router.get("/price/range/category/{category}", response_model=list[ProductRead])
async def list_products_by_price_range_and_category(
    category: ProductCategory,
    min_price: Decimal,
    max_price: Decimal,
    manager: ProductManager = Depends(get_product_manager),
) -> list[Product]:
    return list(
        await manager.list_products_by_price_range_and_category(min_price, max_price, category)
    )


# ── Stock / age ─────────────────────────────────────────────────────
@router.get("/low-stock", response_model=list[ProductRead])
async def list_low_stock_products(
    manager: ProductManager = Depends(get_product_manager),
) -> list[Product]:
    """Available products with fewer than LOW_STOCK_THRESHOLD items."""
    return list(await manager.list_low_stock_products())


@router.get("/most-expensive", response_model=list[ProductRead])
async def list_most_expensive_products(
    manager: ProductManager = Depends(get_product_manager),
) -> list[Product]:
    return list(await manager.list_most_expensive_products())


@router.get("/recent", response_model=list[ProductRead])
async def list_recently_created_products(
    manager: ProductManager = Depends(get_product_manager),
) -> list[Product]:
    return list(await manager.list_recently_created_products())


# ── Single product ──────────────────────────────────────────────────
@router.get("/{product_id}", response_model=ProductRead)
async def get_product(
    product_id: int,
    manager: ProductManager = Depends(get_product_manager),
) -> Product:
    return await manager.get_product_by_id(product_id)


@router.put("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: int,
    body: ProductUpdate,
    manager: ProductManager = Depends(get_product_manager),
) -> Product:
    return await manager.update_product(product_id, body)


@router.patch("/{product_id}/stock", response_model=ProductRead)
async def update_product_stock(
    product_id: int,
    stock_quantity: int,
    manager: ProductManager = Depends(get_product_manager),
) -> Product:
    """Set the stock level; status follows (DISCONTINUED stays DISCONTINUED)."""
    return await manager.update_product_stock(product_id, stock_quantity)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int,
    manager: ProductManager = Depends(get_product_manager),
) -> Response:
    await manager.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
