"""Authentication schemas for request/response models."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from boardshop.domain.user import User


class RegisterRequest(BaseModel):
    """Request schema for customer registration."""

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=8,
        max_length=128,
        description="Password (8-128 characters)",
    )
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "skater@example.com",
                "password": "securepassword123",
                "first_name": "Tony",
                "last_name": "Hawk",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: EmailStr
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@skateshop.com",
                "password": "password123",
            },
        },
    )


class UserResponse(BaseModel):
    """Public view of a user account (never includes the password hash)."""

    id: UUID
    email: str
    role: str = Field(..., description="USER or ADMIN")
    is_active: bool
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    date_of_birth: date | None = None
    avatar: str | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            role=user.role.value,
            is_active=user.is_active,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
            date_of_birth=user.date_of_birth,
            avatar=user.avatar,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AuthResponse(BaseModel):
    """Response schema for login and registration."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Access token lifetime in seconds")
    user: UserResponse
