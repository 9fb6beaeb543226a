"""Typed schemas for user IO."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

if TYPE_CHECKING:
    from inkwell.core.users.models import User


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8)
    name: str = Field(min_length=1, max_length=255)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class LoginRequest(BaseModel):
    email: str
    password: str


class UserResponse(BaseModel):
    # Response should not re-validate persisted emails
    id: str
    email: str
    name: str
    streak: int
    last_entry_date: Optional[date]
    created_at: str

    model_config = ConfigDict(from_attributes=True)


class UserStatsResponse(BaseModel):
    streak: int
    total_entries: int
    total_words: int


def serialize_user(user: "User") -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        name=user.name,
        streak=user.streak,
        last_entry_date=user.last_entry_date,
        created_at=user.created_at.isoformat() if user.created_at else "",
    )
