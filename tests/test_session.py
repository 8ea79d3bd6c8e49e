"""Tests for the application's own session factory on the shared in-memory database."""

import asyncio

import pytest
from sqlalchemy import select

from payloads import user_payload
from storefront.core.exceptions import ConflictError
from storefront.db.base import Base
from storefront.db.session import SerializedAsyncSession, async_session_factory, engine
from storefront.models.user import User
from storefront.schemas.user import UserCreate
from storefront.services.user_manager import UserManager


@pytest.fixture
async def app_tables():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


async def _create_in_own_session(username: str, email: str):
    async with async_session_factory() as session:
        try:
            user = await UserManager(session).create_user(
                UserCreate(**user_payload(username, email=email))
            )
        except ConflictError as exc:
            return exc
        return user.username


def test_in_memory_factory_serializes_sessions():
    assert async_session_factory.class_ is SerializedAsyncSession


@pytest.mark.asyncio
async def test_concurrent_creates_keep_every_successful_insert(app_tables):
    results = await asyncio.gather(
        _create_in_own_session("carol", "c1@x.com"),
        _create_in_own_session("carol", "c2@x.com"),
        _create_in_own_session("dave", "d@x.com"),
    )

    conflicts = [r for r in results if isinstance(r, ConflictError)]
    assert len(conflicts) == 1
    assert conflicts[0].field == "username"
    assert sorted(r for r in results if isinstance(r, str)) == ["carol", "dave"]

    async with async_session_factory() as session:
        rows = (await session.execute(select(User.username).order_by(User.username))).scalars()
        assert list(rows) == ["carol", "dave"]


@pytest.mark.asyncio
async def test_rollback_in_one_session_keeps_other_sessions_writes(app_tables):
    async def _write_then_rollback():
        async with async_session_factory() as session:
            session.add(User(**_user_row("ghost")))
            await session.flush()
            await asyncio.sleep(0)
            await session.rollback()

    await asyncio.gather(
        _write_then_rollback(),
        _create_in_own_session("erin", "erin@x.com"),
    )

    async with async_session_factory() as session:
        rows = (await session.execute(select(User.username))).scalars()
        assert list(rows) == ["erin"]


def _user_row(username: str) -> dict:
    return {
        "username": username,
        "email": f"{username}@x.com",
        "first_name": "G",
        "last_name": "H",
        "hashed_password": "x",
        "status": "ACTIVE",
    }
