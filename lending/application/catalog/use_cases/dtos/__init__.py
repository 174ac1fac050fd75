from .catalog_entry_dtos import CatalogEntryDetailsDto, CatalogEntryDto

__all__ = ["CatalogEntryDetailsDto", "CatalogEntryDto"]
