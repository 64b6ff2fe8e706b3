"""Centralized exception handlers for the FastAPI application.

Domain exceptions are mapped to HTTP responses with one envelope for every
error, including request validation and authentication failures.

Error Response Format:
    {
        "success": false,
        "message": "Human-readable error message",
        "error": "MACHINE_READABLE_ERROR_CODE",
        "statusCode": 404,
        "timestamp": "2024-01-01T00:00:00+00:00",
        "path": "/api/v1/products/...",
        "details": {...}            # optional
    }

Usage:
    from boardshop.presentation.api.exception_handlers import (
        setup_exception_handlers,
    )

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from boardshop.domain.shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from boardshop.domain.shared.time import utc_now
from boardshop_auth import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEAK_PASSWORD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMPTY_ORDER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_QUANTITY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ORDER_TOTAL_TOO_LARGE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PRICE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_STOCK: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_FILE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CANNOT_DELETE_SELF: status.HTTP_400_BAD_REQUEST,
    # 401 Unauthorized
    ErrorCode.AUTHENTICATION_REQUIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    # 403 Forbidden
    ErrorCode.ACCOUNT_DEACTIVATED: status.HTTP_403_FORBIDDEN,
    ErrorCode.INSUFFICIENT_ROLE: status.HTTP_403_FORBIDDEN,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ADDRESS_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CATEGORY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PRODUCT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ORDER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_CATEGORY: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_SKU: status.HTTP_409_CONFLICT,
    ErrorCode.CATEGORY_IN_USE: status.HTTP_409_CONFLICT,
    ErrorCode.PRODUCT_IN_USE: status.HTTP_409_CONFLICT,
    ErrorCode.USER_HAS_ORDERS: status.HTTP_409_CONFLICT,
    ErrorCode.PRODUCT_UNAVAILABLE: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_STATUS_TRANSITION: status.HTTP_409_CONFLICT,
    ErrorCode.ORDER_NOT_EDITABLE: status.HTTP_409_CONFLICT,
    ErrorCode.ORDER_NUMBER_CONFLICT: status.HTTP_409_CONFLICT,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

HTTP_STATUS_TO_CODE: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: ErrorCode.VALIDATION_ERROR.value,
    status.HTTP_401_UNAUTHORIZED: ErrorCode.AUTHENTICATION_REQUIRED.value,
    status.HTTP_403_FORBIDDEN: ErrorCode.INSUFFICIENT_ROLE.value,
    status.HTTP_404_NOT_FOUND: ErrorCode.ENTITY_NOT_FOUND.value,
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
    status.HTTP_409_CONFLICT: ErrorCode.CONFLICT.value,
}


def _get_status_for_exception(exc: DomainException) -> int:  # NOQA: PLR0911
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS and exc.code != ErrorCode.INTERNAL_ERROR:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, AuthenticationError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, AuthorizationError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT

    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _create_error_response(  # NOQA: PLR0913
    request: Request,
    status_code: int,
    message: str,
    code: str,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    content: dict[str, Any] = {
        "success": False,
        "message": message,
        "error": code,
        "statusCode": status_code,
        "timestamp": utc_now().isoformat(),
        "path": request.url.path,
    }
    if details:
        content["details"] = jsonable_encoder(details)

    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer", **(headers or {})}

    return JSONResponse(status_code=status_code, content=content, headers=headers)


def setup_exception_handlers(app: FastAPI) -> None:  # NOQA: C901
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with the error envelope."""
        status_code = _get_status_for_exception(exc)

        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Domain error on %s %s: %r",
                request.method,
                request.url.path,
                exc,
            )
            return _create_error_response(
                request,
                status_code=status_code,
                message=INTERNAL_ERROR_MESSAGE,
                code=ErrorCode.INTERNAL_ERROR.value,
            )

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )
        return _create_error_response(
            request,
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
            details=exc.details,
        )

    @app.exception_handler(AuthError)
    async def auth_exception_handler(request: Request, exc: AuthError) -> JSONResponse:
        """Handle credential infrastructure errors."""
        if isinstance(exc, WeakPasswordError):
            status_code = status.HTTP_400_BAD_REQUEST
            code = ErrorCode.WEAK_PASSWORD
        elif isinstance(exc, InvalidCredentialsError):
            status_code = status.HTTP_401_UNAUTHORIZED
            code = ErrorCode.INVALID_CREDENTIALS
        elif isinstance(exc, InvalidTokenError):
            status_code = status.HTTP_401_UNAUTHORIZED
            code = ErrorCode.INVALID_TOKEN
        else:
            status_code = status.HTTP_401_UNAUTHORIZED
            code = ErrorCode.AUTHENTICATION_REQUIRED

        logger.warning(
            "Auth error on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )
        return _create_error_response(
            request,
            status_code=status_code,
            message=exc.message,
            code=code.value,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Report malformed requests as 400 with the offending fields."""
        errors = [
            {
                "field": ".".join(str(part) for part in error.get("loc", ())),
                "message": error.get("msg", ""),
                "type": error.get("type", ""),
            }
            for error in exc.errors()
        ]
        logger.warning(
            "Validation failed on %s %s: %s",
            request.method,
            request.url.path,
            errors,
        )
        return _create_error_response(
            request,
            status_code=status.HTTP_400_BAD_REQUEST,
            message="Validation failed",
            code=ErrorCode.VALIDATION_ERROR.value,
            details={"errors": errors},
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(
        request: Request,
        exc: IntegrityError,
    ) -> JSONResponse:
        """Constraint violations that no repository translated."""
        logger.warning(
            "Integrity error on %s %s: %s",
            request.method,
            request.url.path,
            exc.orig,
        )
        return _create_error_response(
            request,
            status_code=status.HTTP_409_CONFLICT,
            message="Resource conflicts with existing data",
            code=ErrorCode.CONFLICT.value,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Framework-level HTTP errors (unknown route, wrong method)."""
        code = HTTP_STATUS_TO_CODE.get(exc.status_code, "HTTP_ERROR")
        return _create_error_response(
            request,
            status_code=exc.status_code,
            message=str(exc.detail),
            code=code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all handler; never leaks internals to the client."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            request,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=INTERNAL_ERROR_MESSAGE,
            code=ErrorCode.INTERNAL_ERROR.value,
        )
