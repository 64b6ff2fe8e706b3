"""Pydantic schemas for API request/response models."""

from boardshop.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)
from boardshop.presentation.api.schemas.catalog import (
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductUpdateRequest,
    StockUpdateRequest,
)
from boardshop.presentation.api.schemas.common import ErrorResponse, MessageResponse
from boardshop.presentation.api.schemas.orders import (
    OrderCreateRequest,
    OrderResponse,
    OrderStatusUpdateRequest,
    OrderUpdateRequest,
)
from boardshop.presentation.api.schemas.users import (
    AddressCreateRequest,
    AddressResponse,
    AddressUpdateRequest,
    CreateUserRequest,
    PreferencesRequest,
    PreferencesResponse,
    ProfileResponse,
    UpdateProfileRequest,
    UpdateUserRequest,
)

__all__ = [
    "AddressCreateRequest",
    "AddressResponse",
    "AddressUpdateRequest",
    "AuthResponse",
    "CategoryCreateRequest",
    "CategoryResponse",
    "CategoryUpdateRequest",
    "CreateUserRequest",
    "ErrorResponse",
    "LoginRequest",
    "MessageResponse",
    "OrderCreateRequest",
    "OrderResponse",
    "OrderStatusUpdateRequest",
    "OrderUpdateRequest",
    "PreferencesRequest",
    "PreferencesResponse",
    "ProductCreateRequest",
    "ProductListResponse",
    "ProductResponse",
    "ProductUpdateRequest",
    "ProfileResponse",
    "RegisterRequest",
    "StockUpdateRequest",
    "UpdateProfileRequest",
    "UpdateUserRequest",
    "UserResponse",
]
