"""
Product business rules: stock-driven status and default category / status.

Status follows the stock level at every write. A quantity of zero or less
always means OUT_OF_STOCK; a DISCONTINUED item is never revived by restocking.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import settings
from storefront.core.exceptions import NotFoundError
from storefront.models.product import Product, ProductCategory, ProductStatus
from storefront.schemas.product import ProductCreate, ProductUpdate
from storefront.services.query import contains_ignore_case

logger = logging.getLogger(__name__)


class ProductManager:
    def __init__(
        self,
        db: AsyncSession,
        low_stock_threshold: int | None = None,
        recent_days: int | None = None,
    ) -> None:
        self.db = db
        self.low_stock_threshold = (
            settings.LOW_STOCK_THRESHOLD if low_stock_threshold is None else low_stock_threshold
        )
        self.recent_days = settings.RECENT_PRODUCTS_DAYS if recent_days is None else recent_days

    async def _find_all(self, *criteria) -> list[Product]:
        result = await self.db.execute(select(Product).where(*criteria).order_by(Product.id))
        return list(result.scalars().all())

    # ── Create ──────────────────────────────────────────────────────
    async def create_product(self, data: ProductCreate) -> Product:
        logger.info("Creating new product: %s", data.name)

        status = data.status or ProductStatus.AVAILABLE
        category = data.category or ProductCategory.OTHER
        if data.stock_quantity <= 0:
            status = ProductStatus.OUT_OF_STOCK

        product = Product(
            name=data.name,
            description=data.description,
            price=data.price,
            stock_quantity=data.stock_quantity,
            category=category.value,
            status=status.value,
        )
        self.db.add(product)
        await self.db.commit()
        await self.db.refresh(product)
        logger.info("Product created successfully with ID: %d", product.id)
        return product

    # ── Lookups ─────────────────────────────────────────────────────
    async def get_product_by_id(self, product_id: int) -> Product:
        product = await self.db.get(Product, product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    async def list_products(self) -> Sequence[Product]:
        return await self._find_all()

    async def list_products_by_category(self, category: ProductCategory) -> Sequence[Product]:
        return await self._find_all(Product.category == ProductCategory(category).value)

    async def list_products_by_status(self, status: ProductStatus) -> Sequence[Product]:
        return await self._find_all(Product.status == ProductStatus(status).value)

    async def list_available_products(self) -> Sequence[Product]:
        return await self.list_products_by_status(ProductStatus.AVAILABLE)

    async def list_available_products_by_category(
        self, category: ProductCategory
    ) -> Sequence[Product]:
        return await self._find_all(
            Product.category == ProductCategory(category).value,
            Product.status == ProductStatus.AVAILABLE.value,
        )

    async def search_products_by_name(self, name: str) -> Sequence[Product]:
        return await self._find_all(contains_ignore_case(Product.name, name))

    # ── Price filters ───────────────────────────────────────────────
    async def list_products_by_max_price(self, max_price: Decimal) -> Sequence[Product]:
        return await self._find_all(Product.price <= max_price)

    async def list_products_by_min_price(self, min_price: Decimal) -> Sequence[Product]:
        return await self._find_all(Product.price >= min_price)

    async def list_products_by_price_range(
        self, min_price: Decimal, max_price: Decimal
    ) -> Sequence[Product]:
        return await self._find_all(Product.price.between(min_price, max_price))

    async def list_products_by_price_range_and_category(
        self, min_price: Decimal, max_price: Decimal, category: ProductCategory
    ) -> Sequence[Product]:
        return await self._find_all(
            Product.price.between(min_price, max_price),
            Product.category == ProductCategory(category).value,
        )

    async def list_most_expensive_products(self) -> Sequence[Product]:
        """Every product tied at the catalogue's maximum price."""
        max_price = select(func.max(Product.price)).scalar_subquery()
        return await self._find_all(Product.price == max_price)

    # ── Stock / age filters ─────────────────────────────────────────
    async def list_low_stock_products(self) -> Sequence[Product]:
        return await self._find_all(
            Product.stock_quantity < self.low_stock_threshold,
            Product.status == ProductStatus.AVAILABLE.value,
        )

    async def list_recently_created_products(self) -> Sequence[Product]:
        since = datetime.now(timezone.utc) - timedelta(days=self.recent_days)
        return await self._find_all(Product.created_at >= since)

    # ── Update / delete ─────────────────────────────────────────────
    async def update_product(self, product_id: int, data: ProductUpdate) -> Product:
        logger.info("Updating product with ID: %d", product_id)
        product = await self.get_product_by_id(product_id)

        product.name = data.name
        product.description = data.description
        product.price = data.price
        product.stock_quantity = data.stock_quantity
        product.category = data.category.value

        if data.stock_quantity <= 0:
            product.status = ProductStatus.OUT_OF_STOCK.value
        elif data.status is not None:
            product.status = data.status.value
        product.updated_at = datetime.now(timezone.utc)

        await self.db.commit()
        await self.db.refresh(product)
        logger.info("Product updated successfully with ID: %d", product.id)
        return product

    async def update_product_stock(self, product_id: int, stock_quantity: int) -> Product:
        logger.info("Updating stock for product ID: %d to %d", product_id, stock_quantity)
        product = await self.get_product_by_id(product_id)

        product.stock_quantity = stock_quantity
        if stock_quantity <= 0:
            product.status = ProductStatus.OUT_OF_STOCK.value
        elif product.status == ProductStatus.OUT_OF_STOCK.value:
            product.status = ProductStatus.AVAILABLE.value
        product.updated_at = datetime.now(timezone.utc)

        await self.db.commit()
        await self.db.refresh(product)
        logger.info("Stock updated successfully for product ID: %d", product.id)
        return product

    async def delete_product(self, product_id: int) -> None:
        logger.info("Deleting product with ID: %d", product_id)
        product = await self.get_product_by_id(product_id)
        await self.db.delete(product)
        await self.db.commit()
        logger.info("Product deleted successfully with ID: %d", product_id)
