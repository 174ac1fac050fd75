"""Pydantic schemas for borrowers API."""

from lending.infrastructure.borrowers.schemas.borrower_schemas import (
    BorrowerResponse,
    RegisterBorrowerRequest,
)

__all__ = ["BorrowerResponse", "RegisterBorrowerRequest"]
