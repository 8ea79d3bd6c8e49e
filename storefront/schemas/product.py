"""Pydantic schemas for Product CRUD."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from storefront.models.product import ProductCategory, ProductStatus


class ProductCreate(BaseModel):
    name: str = Field(max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    price: Decimal = Field(gt=0)
    stock_quantity: int = Field(ge=0)
    category: ProductCategory | None = None
    status: ProductStatus | None = None

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Product name is required")
        return v


class ProductUpdate(BaseModel):
    """Full replacement of a product's mutable fields.

    Price positivity is only checked on creation.
    """

    name: str = Field(max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    price: Decimal
    stock_quantity: int = Field(ge=0)
    category: ProductCategory = ProductCategory.ELECTRONICS
    status: ProductStatus | None = None

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Product name is required")
        return v


class ProductRead(BaseModel):
    id: int
    name: str
    description: str | None
    price: Decimal
    stock_quantity: int
    category: ProductCategory
    status: ProductStatus
    created_at: datetime | None
    updated_at: datetime | None

    model_config = {"from_attributes": True}
