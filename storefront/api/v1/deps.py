"""
FastAPI dependencies: database session and the business-rule managers.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.db.session import async_session_factory
from storefront.services.product_manager import ProductManager
from storefront.services.user_manager import UserManager


# ── Database session ────────────────────────────────────────────────
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


# ── Managers ────────────────────────────────────────────────────────
async def get_user_manager(db: AsyncSession = Depends(get_db)) -> UserManager:
    return UserManager(db)


async def get_product_manager(db: AsyncSession = Depends(get_db)) -> ProductManager:
    return ProductManager(db)
