"""
Product model: catalogue entries whose status follows the stock level.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from sqlalchemy import Column, DateTime, Integer, Numeric, String

from storefront.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProductCategory(str, Enum):
    ELECTRONICS = "ELECTRONICS"
    CLOTHING = "CLOTHING"
    BOOKS = "BOOKS"
    HOME = "HOME"
    SPORTS = "SPORTS"
    FOOD = "FOOD"
    OTHER = "OTHER"


class ProductStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    DISCONTINUED = "DISCONTINUED"


class Product(Base):
    __tablename__ = "products"

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    name: str = Column(String(200), nullable=False, index=True)  # type: ignore[assignment]
    description: str | None = Column(String(1000), nullable=True)  # type: ignore[assignment]
    price: Decimal = Column(Numeric(10, 2), nullable=False, index=True)  # type: ignore[assignment]
    stock_quantity: int = Column(Integer, nullable=False)  # type: ignore[assignment]
    category: str = Column(  # type: ignore[assignment]
        String(20),
        nullable=False,
        default=ProductCategory.ELECTRONICS.value,
        index=True,
    )
    status: str = Column(  # type: ignore[assignment]
        String(20),
        nullable=False,
        default=ProductStatus.AVAILABLE.value,
        index=True,
    )  # AVAILABLE | OUT_OF_STOCK | DISCONTINUED
    created_at: datetime = Column(  # type: ignore[assignment]
        DateTime(timezone=True),
        default=_utcnow,
        index=True,
    )
    updated_at: datetime = Column(  # type: ignore[assignment]
        DateTime(timezone=True),
        default=_utcnow,
        onupdate=_utcnow,
    )
