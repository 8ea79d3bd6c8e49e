"""
Sample data seeded on startup so a fresh in-memory database has something to query.

Each table is only populated when it is empty.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.security import get_password_hash
from storefront.models.product import Product, ProductCategory, ProductStatus
from storefront.models.user import User, UserStatus

logger = logging.getLogger(__name__)

SAMPLE_PASSWORD = "password123"

SAMPLE_USERS = [
    ("john_doe", "john.doe@example.com", "John", "Doe", UserStatus.ACTIVE),
    ("jane_smith", "jane.smith@example.com", "Jane", "Smith", UserStatus.ACTIVE),
    ("bob_wilson", "bob.wilson@example.com", "Bob", "Wilson", UserStatus.INACTIVE),
    ("alice_brown", "alice.brown@example.com", "Alice", "Brown", UserStatus.ACTIVE),
    ("charlie_davis", "charlie.davis@example.com", "Charlie", "Davis", UserStatus.SUSPENDED),
]

# name, description, price, stock, category
SAMPLE_PRODUCTS = [
    ("MacBook Pro 16-inch", "Apple MacBook Pro with M2 chip, 16GB RAM, 512GB SSD",
     "2499.99", 15, ProductCategory.ELECTRONICS),
    ("iPhone 15 Pro", "Apple iPhone 15 Pro with A17 Pro chip, 128GB storage",
     "999.99", 25, ProductCategory.ELECTRONICS),
    ("Sony WH-1000XM5", "Wireless noise-canceling headphones with 30-hour battery life",
     "399.99", 8, ProductCategory.ELECTRONICS),
    ("Cotton T-Shirt", "Comfortable 100% cotton t-shirt, available in multiple colors",
     "24.99", 50, ProductCategory.CLOTHING),
    ("Slim Fit Jeans", "Modern slim fit jeans with stretch fabric",
     "79.99", 30, ProductCategory.CLOTHING),
    ("Clean Code", "A Handbook of Agile Software Craftsmanship by Robert C. Martin",
     "44.99", 20, ProductCategory.BOOKS),
    ("Design Patterns", "Elements of Reusable Object-Oriented Software",
     "54.99", 12, ProductCategory.BOOKS),
    ("Programmable Coffee Maker", "12-cup programmable coffee maker with auto-shutoff",
     "89.99", 5, ProductCategory.HOME),
    ("Premium Yoga Mat", "Non-slip yoga mat with carrying strap",
     "34.99", 0, ProductCategory.SPORTS),
    ("Organic Coffee Beans", "Premium organic coffee beans, medium roast",
     "19.99", 3, ProductCategory.FOOD),
]


async def _count(db: AsyncSession, model) -> int:
    result = await db.execute(select(func.count()).select_from(model))
    return result.scalar() or 0


async def seed_sample_data(db: AsyncSession) -> None:
    logger.info("Initializing sample data...")

    if await _count(db, User) == 0:
        hashed = get_password_hash(SAMPLE_PASSWORD)
        for username, email, first, last, user_status in SAMPLE_USERS:
            db.add(
                User(
                    username=username,
                    email=email,
                    first_name=first,
                    last_name=last,
                    hashed_password=hashed,
                    status=user_status.value,
                )
            )
        await db.commit()
        logger.info("Created %d sample users", await _count(db, User))

    if await _count(db, Product) == 0:
        for name, description, price, stock, category in SAMPLE_PRODUCTS:
            status = ProductStatus.AVAILABLE if stock > 0 else ProductStatus.OUT_OF_STOCK
            db.add(
                Product(
                    name=name,
                    description=description,
                    price=Decimal(price),
                    stock_quantity=stock,
                    category=category.value,
                    status=status.value,
                )
            )
        await db.commit()
        logger.info("Created %d sample products", await _count(db, Product))

    logger.info("Sample data initialization completed")
