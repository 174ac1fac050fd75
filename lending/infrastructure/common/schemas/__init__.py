"""Common infrastructure schemas."""

from lending.infrastructure.common.schemas.response_wrappers import (
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
]
