"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from uuid import UUID

from boardshop.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """
    Raised when email format is invalid.

    This exception is raised during Email value object creation
    when the provided string doesn't match expected email format.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_EMAIL)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"Email already registered: {email}",
            code=ErrorCode.DUPLICATE_EMAIL,
            details={"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: str | UUID) -> None:
        self.user_id = str(user_id)
        super().__init__(
            f"User not found: {user_id}",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": str(user_id)},
        )


class AddressNotFoundError(EntityNotFoundError):
    """Address not found, or not owned by the caller."""

    def __init__(self, address_id: str | UUID) -> None:
        super().__init__(
            f"Address not found: {address_id}",
            code=ErrorCode.ADDRESS_NOT_FOUND,
            details={"address_id": str(address_id)},
        )


class CannotDeleteSelfError(ValidationError):
    """Cannot delete your own account."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot delete your own account",
            code=ErrorCode.CANNOT_DELETE_SELF,
        )


class UserHasOrdersError(ConflictError):
    """User still owns orders and cannot be deleted."""

    def __init__(self, user_id: str | UUID, order_count: int) -> None:
        super().__init__(
            f"User has {order_count} order(s) and cannot be deleted; "
            "deactivate the account instead",
            code=ErrorCode.USER_HAS_ORDERS,
            details={"user_id": str(user_id), "order_count": order_count},
        )


class InvalidAvatarError(ValidationError):
    """Uploaded avatar is missing, of a disallowed type, or too large."""

    def __init__(self, message: str, filename: str | None = None) -> None:
        super().__init__(
            message,
            code=ErrorCode.INVALID_FILE,
            details={"filename": filename},
        )
