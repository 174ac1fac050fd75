"""Catalog bounded context: bibliographic records keyed by ISBN."""

from .entities.catalog_entry import CatalogEntry
from .exceptions import CatalogEntryMetadataConflictError, CatalogEntryNotFoundError

__all__ = [
    "CatalogEntry",
    "CatalogEntryMetadataConflictError",
    "CatalogEntryNotFoundError",
]
