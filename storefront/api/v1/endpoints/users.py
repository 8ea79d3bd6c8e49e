"""
User CRUD + lookup / search endpoints.

Fixed paths (``/active``, ``/search/...``) are declared before ``/{user_id}``
so they are not swallowed by the id route.
"""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Query, Response, status

from storefront.api.v1.deps import get_user_manager
from storefront.models.user import User, UserStatus
from storefront.schemas.user import UserCreate, UserRead, UserUpdate
from storefront.services.user_manager import UserManager

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserCreate,
    manager: UserManager = Depends(get_user_manager),
) -> User:
    """Create a new user. 409 if the username or email is taken."""
    logger.info("POST /users - Creating user: %s", body.username)
    return await manager.create_user(body)


@router.get("", response_model=list[UserRead])
async def list_users(manager: UserManager = Depends(get_user_manager)) -> list[User]:
    return list(await manager.list_users())


@router.get("/active", response_model=list[UserRead])
async def list_active_users(manager: UserManager = Depends(get_user_manager)) -> list[User]:
    return list(await manager.list_active_users())


@router.get("/status/{user_status}", response_model=list[UserRead])
async def list_users_by_status(
    user_status: UserStatus,
    manager: UserManager = Depends(get_user_manager),
) -> list[User]:
    return list(await manager.list_users_by_status(user_status))


@router.get("/username/{username}", response_model=UserRead)
async def get_user_by_username(
    username: str,
    manager: UserManager = Depends(get_user_manager),
) -> User:
    return await manager.get_user_by_username(username)


@router.get("/email/{email}", response_model=UserRead)
async def get_user_by_email(
    email: str,
    manager: UserManager = Depends(get_user_manager),
) -> User:
    return await manager.get_user_by_email(email)


@router.get("/search/firstname", response_model=list[UserRead])
async def search_users_by_first_name(
    first_name: str = Query(),
    manager: UserManager = Depends(get_user_manager),
) -> list[User]:
    return list(await manager.search_users_by_first_name(first_name))


@router.get("/search/lastname", response_model=list[UserRead])
async def search_users_by_last_name(
    last_name: str = Query(),
    manager: UserManager = Depends(get_user_manager),
) -> list[User]:
    return list(await manager.search_users_by_last_name(last_name))


@router.get("/created-after", response_model=list[UserRead])
async def list_users_created_after(
    date: datetime = Query(description="ISO-8601 timestamp; naive values are UTC"),
    manager: UserManager = Depends(get_user_manager),
) -> list[User]:
    return list(await manager.list_users_created_after(date))


@router.get("/email-domain/{domain}", response_model=list[UserRead])
async def list_users_by_email_domain(
    domain: str,
    manager: UserManager = Depends(get_user_manager),
) -> list[User]:
    return list(await manager.list_users_by_email_domain(domain))


@router.get("/{user_id}", response_model=UserRead)
async def get_user(
    user_id: int,
    manager: UserManager = Depends(get_user_manager),
) -> User:
    return await manager.get_user_by_id(user_id)


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: int,
    body: UserUpdate,
    manager: UserManager = Depends(get_user_manager),
) -> User:
    """Replace a user's mutable fields. An empty password keeps the current one."""
    return await manager.update_user(user_id, body)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    manager: UserManager = Depends(get_user_manager),
) -> Response:
    """Hard-delete a user."""
    await manager.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
