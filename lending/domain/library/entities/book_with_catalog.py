from dataclasses import dataclass

from lending.domain.catalog.entities.catalog_entry import CatalogEntry
from lending.domain.library.entities.book import Book


@dataclass(frozen=True)
class BookWithCatalog:
    """Read model pairing a book copy with its resolved catalog entry."""

    book: Book
    catalog_entry: CatalogEntry
