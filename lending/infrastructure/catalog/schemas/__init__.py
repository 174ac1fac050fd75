"""Pydantic schemas for catalog API."""

from lending.infrastructure.catalog.schemas.catalog_entry_schemas import (
    CatalogEntryDetailsResponse,
    CatalogEntryResponse,
    UpdateCatalogEntryRequest,
)

__all__ = ["CatalogEntryDetailsResponse", "CatalogEntryResponse", "UpdateCatalogEntryRequest"]
