"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field, field_validator

from storefront.shared.schema import CamelModel


class RegisterRequest(CamelModel):
    username: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=6)
    external_id: str | None = Field(None, max_length=255)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        # bcrypt accepts at most 72 bytes
        if len(value.encode("utf-8")) > 72:
            raise ValueError("Password must be at most 72 bytes")
        return value


class LoginRequest(CamelModel):
    email: str
    password: str


class UserResponse(CamelModel):
    """Public view of a user. Never carries the password hash."""

    id: str
    username: str
    email: str
    is_admin: bool
    role: str
    created_at: datetime | None = None

    @classmethod
    def from_aggregate(cls, user) -> UserResponse:
        return cls(
            id=str(user.id),
            username=user.username,
            email=user.email,
            is_admin=bool(user.is_admin),
            role=user.role,
            created_at=user.created_at,
        )


class AuthResponse(CamelModel):
    user: UserResponse
    token: str


class AddToWishlistRequest(CamelModel):
    user_id: str
    product_id: str


class WishlistItemResponse(CamelModel):
    id: str
    user_id: str
    product_id: str
    created_at: datetime | None = None

    @classmethod
    def from_aggregate(cls, item) -> WishlistItemResponse:
        return cls(
            id=str(item.id),
            user_id=str(item.user_id),
            product_id=str(item.product_id),
            created_at=item.created_at,
        )
