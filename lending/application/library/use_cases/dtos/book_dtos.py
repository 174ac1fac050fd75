"""DTOs for book use cases."""

from dataclasses import dataclass

from lending.application.catalog.use_cases.dtos import CatalogEntryDto
from lending.domain.catalog.entities.catalog_entry import CatalogEntry
from lending.domain.library.entities.book import Book
from lending.domain.library.entities.book_with_catalog import BookWithCatalog


@dataclass(frozen=True)
class BookDetailsDto:
    """DTO for a book copy with its catalog details and loan state."""

    id: str
    isbn: str
    catalog_entry: CatalogEntryDto
    is_available: bool
    borrowed_by: str | None

    @classmethod
    def from_domain(cls, book: Book, catalog_entry: CatalogEntry) -> "BookDetailsDto":
        return cls(
            id=book.id.value,
            isbn=book.isbn.value,
            catalog_entry=CatalogEntryDto.from_domain(catalog_entry),
            is_available=book.is_available,
            borrowed_by=book.borrower_id.value if book.borrower_id else None,
        )

    @classmethod
    def from_read_model(cls, source: BookWithCatalog) -> "BookDetailsDto":
        return cls.from_domain(source.book, source.catalog_entry)
