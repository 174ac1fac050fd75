"""DTOs for catalog entry use cases."""

from dataclasses import dataclass

from lending.domain.catalog.entities.catalog_entry import CatalogEntry


@dataclass(frozen=True)
class CatalogEntryDto:
    """Title and author of a catalog entry, nested inside book DTOs."""

    title: str
    author: str

    @classmethod
    def from_domain(cls, catalog_entry: CatalogEntry) -> "CatalogEntryDto":
        return cls(title=catalog_entry.title, author=catalog_entry.author)


@dataclass(frozen=True)
class CatalogEntryDetailsDto:
    """Full catalog entry including its ISBN."""

    isbn: str
    title: str
    author: str

    @classmethod
    def from_domain(cls, catalog_entry: CatalogEntry) -> "CatalogEntryDetailsDto":
        return cls(
            isbn=catalog_entry.isbn.value,
            title=catalog_entry.title,
            author=catalog_entry.author,
        )
