"""JWT token service.

Provides JWT token creation and verification for authentication.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from boardshop_auth.exceptions import InvalidTokenError
from boardshop_auth.schemas import TokenPayload


class JWTService:
    """Service for JWT access token creation and verification.

    Tokens are HS256-signed and carry the subject id, email and role of
    the user they were issued for.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(user_id, "user@example.com", "USER")
    >>> payload = service.verify_token(token)
    >>> print(payload.user_id)
    """

    DEFAULT_ACCESS_EXPIRE_MINUTES = 60
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_minutes: int = DEFAULT_ACCESS_EXPIRE_MINUTES,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_minutes
            Minutes until an access token expires (default 60)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(minutes=access_token_expire_minutes)

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._access_expire

    def create_access_token(
        self,
        user_id: UUID,
        email: str,
        role: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed, time-limited access token.

        Parameters
        ----------
        user_id
            The user's unique identifier
        email
            The user's email address
        role
            The user's role name (e.g. "ADMIN" or "USER")
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta or self._access_expire)

        payload = {
            "sub": str(user_id),
            "email": email,
            "role": role,
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded claims

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
            )

            return TokenPayload(
                user_id=UUID(payload["sub"]),
                email=payload["email"],
                role=payload["role"],
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
