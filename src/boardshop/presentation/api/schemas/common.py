"""Common schemas shared across API endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str = Field(..., description="What happened")


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""

    success: bool = Field(default=False)
    message: str = Field(..., description="Human-readable error message")
    error: str = Field(..., description="Stable machine-readable error code")
    statusCode: int = Field(..., description="HTTP status code")  # NOQA: N815
    timestamp: str = Field(..., description="When the error occurred (ISO 8601)")
    path: str = Field(..., description="Request path")
    details: dict[str, Any] | None = Field(None, description="Extra context")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "message": "Product not found: 7f7a...",
                "error": "PRODUCT_NOT_FOUND",
                "statusCode": 404,
                "timestamp": "2024-05-01T12:00:00+00:00",
                "path": "/api/v1/products/7f7a...",
            },
        },
    )
