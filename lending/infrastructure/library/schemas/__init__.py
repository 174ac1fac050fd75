"""Pydantic schemas for library API."""

from lending.infrastructure.library.schemas.book_schemas import (
    BookResponse,
    BorrowBookRequest,
    RegisterBookRequest,
    ReturnBookRequest,
)

__all__ = ["BookResponse", "BorrowBookRequest", "RegisterBookRequest", "ReturnBookRequest"]
