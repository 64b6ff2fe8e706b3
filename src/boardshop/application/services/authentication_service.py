"""Authentication service for user registration, login and token resolution."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from boardshop.domain.shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ErrorCode,
)
from boardshop.domain.user import EmailAlreadyExistsError, User, UserRole
from boardshop_auth import (
    InvalidCredentialsError,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
)

if TYPE_CHECKING:
    from boardshop.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates boardshop_auth infrastructure (password hashing, JWT tokens)
    with the User domain to provide:
    - User registration
    - Login with password
    - Resolving a bearer token to an active user

    This service is the bridge between the generic auth infrastructure
    and the domain-specific User aggregate.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    @property
    def access_token_lifetime_seconds(self) -> int:
        return int(self._jwt_service.access_token_lifetime.total_seconds())

    def _create_access_token(self, user: User) -> str:
        return self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
            role=user.role.value,
        )

    async def register(
        self,
        email: str,
        password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> tuple[User, str]:
        """
        Register a new customer account and issue an access token.

        Self-registration always yields role USER.

        Raises
        ------
        EmailAlreadyExistsError
            If the email is already registered
        WeakPasswordError
            If the password does not meet requirements
        """
        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email.strip().lower())

        password_hash = self._password_service.hash(password)
        user = User.create(
            email,
            password_hash=password_hash,
            role=UserRole.USER,
            first_name=first_name,
            last_name=last_name,
        )
        await self._user_repo.save(user)

        logger.info("User registered: %s", user.email)
        return user, self._create_access_token(user)

    async def login(self, email: str, password: str) -> tuple[User, str]:
        """
        Verify credentials and issue an access token.

        A password hash stored with an outdated bcrypt work factor is
        replaced; the caller commits the session.

        Raises
        ------
        InvalidCredentialsError
            If the email is unknown or the password does not match
        AuthorizationError
            If the account has been deactivated
        """
        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise InvalidCredentialsError

        if not self._password_service.verify(password, user.password_hash):
            logger.warning("Failed login attempt for: %s", user.email)
            raise InvalidCredentialsError

        if not user.is_active:
            raise AuthorizationError(
                "Account is deactivated",
                code=ErrorCode.ACCOUNT_DEACTIVATED,
            )

        upgraded = self._password_service.rehash(password, user.password_hash)
        if upgraded is not None:
            user.change_password_hash(upgraded)
            await self._user_repo.save(user)
            logger.info("Password hash upgraded for: %s", user.email)

        logger.info("User logged in: %s", user.email)
        return user, self._create_access_token(user)

    async def authenticate(self, token: str) -> User:
        """
        Resolve a bearer token to the active user it was issued for.

        Raises
        ------
        AuthenticationError
            If the token is invalid, expired or its subject no longer exists
        AuthorizationError
            If the account has been deactivated
        """
        try:
            payload = self._jwt_service.verify_token(token)
        except InvalidTokenError as e:
            logger.warning("Invalid token: %s", e)
            raise AuthenticationError(
                "Invalid or expired token",
                code=ErrorCode.INVALID_TOKEN,
            ) from e

        user = await self._user_repo.find_by_id(payload.user_id)
        if user is None:
            logger.warning("User not found for token: %s", payload.user_id)
            raise AuthenticationError(
                "User no longer exists",
                code=ErrorCode.INVALID_TOKEN,
            )

        if not user.is_active:
            raise AuthorizationError(
                "Account is deactivated",
                code=ErrorCode.ACCOUNT_DEACTIVATED,
            )

        return user
