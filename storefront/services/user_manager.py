"""
User business rules: unique username / email, password hashing, default status.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.exceptions import ConflictError, NotFoundError
from storefront.core.security import get_password_hash
from storefront.models.user import User, UserStatus
from storefront.schemas.user import UserCreate, UserUpdate
from storefront.services.query import as_utc, contains_ignore_case

logger = logging.getLogger(__name__)


class UserManager:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    # ── Helpers ─────────────────────────────────────────────────────
    async def _find_one(self, *criteria) -> User | None:
        result = await self.db.execute(select(User).where(*criteria))
        return result.scalar_one_or_none()

    async def _find_all(self, *criteria) -> list[User]:
        result = await self.db.execute(select(User).where(*criteria).order_by(User.id))
        return list(result.scalars().all())

    async def username_exists(self, username: str) -> bool:
        return await self._find_one(User.username == username) is not None

    async def email_exists(self, email: str) -> bool:
        return await self._find_one(User.email == email) is not None

    async def _commit_unique(self, user: User) -> None:
        """Commit, turning a unique-index violation into a ConflictError."""
        user_id, username, email = user.id, user.username, user.email
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            # Someone else took the value between our check and the write
            if await self._find_one(User.username == username, User.id != user_id):
                raise ConflictError("username", username) from None
            raise ConflictError("email", email) from None
        await self.db.refresh(user)

    # ── Create ──────────────────────────────────────────────────────
    async def create_user(self, data: UserCreate) -> User:
        logger.info("Creating new user: %s", data.username)

        if await self.username_exists(data.username):
            logger.warning("Username already exists: %s", data.username)
            raise ConflictError("username", data.username)
        if await self.email_exists(data.email):
            logger.warning("Email already exists: %s", data.email)
            raise ConflictError("email", data.email)

        user = User(
            username=data.username,
            email=data.email,
            first_name=data.first_name,
            last_name=data.last_name,
            hashed_password=get_password_hash(data.password),
            status=(data.status or UserStatus.ACTIVE).value,
        )
        self.db.add(user)
        await self._commit_unique(user)
        logger.info("User created successfully with ID: %d", user.id)
        return user

    # ── Lookups ─────────────────────────────────────────────────────
    async def get_user_by_id(self, user_id: int) -> User:
        user = await self.db.get(User, user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def get_user_by_username(self, username: str) -> User:
        user = await self._find_one(User.username == username)
        if user is None:
            raise NotFoundError("User", username, field="username")
        return user

    async def get_user_by_email(self, email: str) -> User:
        user = await self._find_one(User.email == email)
        if user is None:
            raise NotFoundError("User", email, field="email")
        return user

    async def list_users(self) -> Sequence[User]:
        return await self._find_all()

    async def list_users_by_status(self, status: UserStatus) -> Sequence[User]:
        return await self._find_all(User.status == UserStatus(status).value)

    async def list_active_users(self) -> Sequence[User]:
        return await self.list_users_by_status(UserStatus.ACTIVE)

    async def search_users_by_first_name(self, first_name: str) -> Sequence[User]:
        return await self._find_all(contains_ignore_case(User.first_name, first_name))

    async def search_users_by_last_name(self, last_name: str) -> Sequence[User]:
        return await self._find_all(contains_ignore_case(User.last_name, last_name))

    async def list_users_created_after(self, when: datetime) -> Sequence[User]:
        return await self._find_all(User.created_at >= as_utc(when))

    async def list_users_by_email_domain(self, domain: str) -> Sequence[User]:
        return await self._find_all(User.email.endswith(domain, autoescape=True))

    # ── Update / delete ─────────────────────────────────────────────
    async def update_user(self, user_id: int, data: UserUpdate) -> User:
        logger.info("Updating user with ID: %d", user_id)
        user = await self.get_user_by_id(user_id)

        if data.username != user.username and await self._find_one(
            User.username == data.username, User.id != user_id
        ):
            logger.warning("Username already exists: %s", data.username)
            raise ConflictError("username", data.username)
        if data.email != user.email and await self._find_one(
            User.email == data.email, User.id != user_id
        ):
            logger.warning("Email already exists: %s", data.email)
            raise ConflictError("email", data.email)

        user.username = data.username
        user.email = data.email
        user.first_name = data.first_name
        user.last_name = data.last_name
        user.status = data.status.value
        if data.password:
            user.hashed_password = get_password_hash(data.password)
        user.updated_at = datetime.now(timezone.utc)

        await self._commit_unique(user)
        logger.info("User updated successfully with ID: %d", user.id)
        return user

    async def delete_user(self, user_id: int) -> None:
        logger.info("Deleting user with ID: %d", user_id)
        user = await self.get_user_by_id(user_id)
        await self.db.delete(user)
        await self.db.commit()
        logger.info("User deleted successfully with ID: %d", user_id)
