"""Infrastructure layer repositories for catalog bounded context."""

from lending.infrastructure.catalog.repositories.catalog_entry_repository import (
    CatalogEntryRepository,
)

__all__ = ["CatalogEntryRepository"]
