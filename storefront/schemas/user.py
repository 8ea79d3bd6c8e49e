"""Pydantic schemas for User CRUD."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from storefront.models.user import UserStatus

MIN_PASSWORD_LENGTH = 6


def _not_blank(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("must not be blank")
    return v


class UserCreate(BaseModel):
    username: str = Field(max_length=100)
    email: str = Field(max_length=320)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)
    status: UserStatus | None = None

    @field_validator("username", "email", "first_name", "last_name")
    @classmethod
    def _required(cls, v: str) -> str:
        return _not_blank(v)


class UserUpdate(BaseModel):
    """Full replacement of a user's mutable fields.

    ``status`` falls back to ACTIVE when omitted, and an empty or missing
    ``password`` keeps the stored hash.
    """

    username: str = Field(max_length=100)
    email: str = Field(max_length=320)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    password: str | None = None
    status: UserStatus = UserStatus.ACTIVE

    @field_validator("username", "email", "first_name", "last_name")
    @classmethod
    def _required(cls, v: str) -> str:
        return _not_blank(v)

    @field_validator("password")
    @classmethod
    def _password(cls, v: str | None) -> str | None:
        if v and len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        return v


class UserRead(BaseModel):
    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    status: UserStatus
    created_at: datetime | None
    updated_at: datetime | None

    model_config = {"from_attributes": True}
