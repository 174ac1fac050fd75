"""Pydantic schemas for Book API request/response validation."""

from pydantic import BaseModel, Field

from lending.application.library.use_cases.dtos import BookDetailsDto
from lending.infrastructure.catalog.schemas import CatalogEntryResponse


class RegisterBookRequest(BaseModel):
    """Schema for registering a new physical copy."""

    isbn: str = Field(..., description="ISBN-10 or ISBN-13, hyphens and spaces allowed")
    title: str = Field(..., max_length=500, description="Book title")
    author: str = Field(..., max_length=500, description="Book author")


class BorrowBookRequest(BaseModel):
    borrower_id: str = Field(..., description="Id of the borrower taking the copy")


class ReturnBookRequest(BaseModel):
    borrower_id: str = Field(..., description="Id of the borrower bringing the copy back")


class BookResponse(BaseModel):
    """Schema for Book response."""

    id: str
    isbn: str
    catalog_entry: CatalogEntryResponse
    is_available: bool
    borrowed_by: str | None = None

    @classmethod
    def from_dto(cls, dto: BookDetailsDto) -> "BookResponse":
        return cls(
            id=dto.id,
            isbn=dto.isbn,
            catalog_entry=CatalogEntryResponse.from_dto(dto.catalog_entry),
            is_available=dto.is_available,
            borrowed_by=dto.borrowed_by,
        )
