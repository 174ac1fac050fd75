"""Pydantic schemas for CatalogEntry API request/response validation."""

from pydantic import BaseModel, Field

from lending.application.catalog.use_cases.dtos import CatalogEntryDetailsDto, CatalogEntryDto


class CatalogEntryResponse(BaseModel):
    """Title and author, as nested inside book responses."""

    title: str
    author: str

    @classmethod
    def from_dto(cls, dto: CatalogEntryDto) -> "CatalogEntryResponse":
        return cls(title=dto.title, author=dto.author)


class CatalogEntryDetailsResponse(BaseModel):
    """Schema for CatalogEntry response."""

    isbn: str = Field(..., description="Normalized ISBN (digits only, uppercase X)")
    title: str
    author: str

    @classmethod
    def from_dto(cls, dto: CatalogEntryDetailsDto) -> "CatalogEntryDetailsResponse":
        return cls(isbn=dto.isbn, title=dto.title, author=dto.author)


class UpdateCatalogEntryRequest(BaseModel):
    """Schema for updating the metadata of a catalog entry."""

    title: str = Field(..., max_length=500, description="Book title")
    author: str = Field(..., max_length=500, description="Book author")
