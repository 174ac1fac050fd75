"""Catalog domain exceptions."""

from lending.domain.common.exceptions import ConflictError, EntityNotFoundError


class CatalogEntryNotFoundError(EntityNotFoundError):
    """Raised when no catalog entry exists for an ISBN."""

    def __init__(self, isbn: str) -> None:
        super().__init__("Catalog entry", isbn, key_name="ISBN")


class CatalogEntryMetadataConflictError(ConflictError):
    """Raised when registering a copy whose title/author disagree with the catalog."""

    def __init__(
        self,
        isbn: str,
        existing_title: str,
        existing_author: str,
        provided_title: str,
        provided_author: str,
    ) -> None:
        super().__init__(
            "catalog_entry_metadata_mismatch",
            f"ISBN '{isbn}' already exists with different metadata. "
            f"Expected: Title='{existing_title}', Author='{existing_author}'. "
            f"Provided: Title='{provided_title}', Author='{provided_author}'.",
        )
        self.isbn = isbn
