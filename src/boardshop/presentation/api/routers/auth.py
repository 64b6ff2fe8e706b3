"""Authentication router for registration, login and the current user."""

import logging

from fastapi import APIRouter, status

from boardshop.domain.user import User
from boardshop.presentation.api.dependencies import AuthService, CurrentUser, DBSession
from boardshop.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _create_auth_response(
    user: User,
    access_token: str,
    auth_service: AuthService,
) -> AuthResponse:
    return AuthResponse(
        access_token=access_token,
        token_type="bearer",
        expires_in=auth_service.access_token_lifetime_seconds,
        user=UserResponse.from_domain(user),
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new customer",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Invalid input (weak password)"},
        409: {"description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    """
    Register a new account and receive an access token.

    Self-registered accounts always have the USER role.
    """
    try:
        user, access_token = await auth_service.register(
            email=request.email,
            password=request.password,
            first_name=request.first_name,
            last_name=request.last_name,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return _create_auth_response(user, access_token, auth_service)


@router.post(
    "/login",
    summary="Login with email and password",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
        403: {"description": "Account deactivated"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    """Authenticate with email and password and receive an access token."""
    try:
        user, access_token = await auth_service.login(
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return _create_auth_response(user, access_token, auth_service)


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user"},
        401: {"description": "Not authenticated"},
    },
)
async def get_me(user: CurrentUser) -> UserResponse:
    """Return the account the bearer token was issued for."""
    return UserResponse.from_domain(user)
