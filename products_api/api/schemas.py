"""API schemas shared by all routers.

Catalog and auth transfer objects live beside their services; this
module holds the response envelopes common to every endpoint.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[Any] | dict[str, Any] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class MessageResponse(BaseModel):
    """Plain status message."""

    message: str
