"""Common response wrapper schemas for API responses."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    error: str = Field(..., description="Error kind, e.g. ValidationError, NotFound, Conflict")
    message: str = Field(..., description="Human readable description of the failure")


class HealthResponse(BaseModel):
    status: str
