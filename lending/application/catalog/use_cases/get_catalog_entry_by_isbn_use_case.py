"""Use case for looking up a catalog entry."""

from dataclasses import dataclass

from lending.application.catalog.protocols.catalog_entry_repository import (
    CatalogEntryRepositoryProtocol,
)
from lending.application.catalog.use_cases.dtos import CatalogEntryDetailsDto
from lending.application.common import Query, QueryHandler
from lending.domain.catalog.exceptions import CatalogEntryNotFoundError
from lending.domain.common.value_objects import Isbn


@dataclass(frozen=True)
class GetCatalogEntryByIsbnQuery(Query):
    isbn: str


class GetCatalogEntryByIsbnQueryHandler(
    QueryHandler[GetCatalogEntryByIsbnQuery, CatalogEntryDetailsDto]
):
    """Fetches one catalog entry by ISBN."""

    def __init__(self, catalog_entry_repository: CatalogEntryRepositoryProtocol) -> None:
        self.catalog_entry_repository = catalog_entry_repository

    async def handle(self, query: GetCatalogEntryByIsbnQuery) -> CatalogEntryDetailsDto:
        """
        Raises:
            ValidationError: If the ISBN is malformed
            CatalogEntryNotFoundError: If no entry has this ISBN
        """
        isbn = Isbn.create(query.isbn)

        catalog_entry = await self.catalog_entry_repository.get_by_isbn(isbn)
        if catalog_entry is None:
            raise CatalogEntryNotFoundError(query.isbn)

        return CatalogEntryDetailsDto.from_domain(catalog_entry)
