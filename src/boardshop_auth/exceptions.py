"""Credential and token errors raised by boardshop_auth.

The API maps each subclass to its own status code and error code.
"""


class AuthError(Exception):
    """Base class; ``message`` is safe to show to the client."""

    default_message = "Authentication failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Bearer token is malformed, badly signed or expired."""

    default_message = "Invalid or expired token"


class WeakPasswordError(AuthError):
    default_message = "Password does not meet the length requirements"


class InvalidCredentialsError(AuthError):
    """Login failed; never says whether the email or the password was wrong."""

    default_message = "Invalid email or password"
