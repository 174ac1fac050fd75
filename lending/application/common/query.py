"""
Query and QueryHandler base classes.

Queries represent requests for information without side effects.
They are named descriptively: GetAllBooks, GetCatalogEntryByIsbn, etc.

Example:
    @dataclass(frozen=True)
    class GetCatalogEntryByIsbnQuery(Query):
        isbn: str

    class GetCatalogEntryByIsbnQueryHandler(
        QueryHandler[GetCatalogEntryByIsbnQuery, CatalogEntryDetailsDto]
    ):
        async def handle(self, query: GetCatalogEntryByIsbnQuery) -> CatalogEntryDetailsDto:
            entry = await self.catalog_entry_repository.get_by_isbn(Isbn.create(query.isbn))
            ...
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

# Input type (the query)
TQuery = TypeVar("TQuery", bound="Query")
# Output type (the result of the query)
TResult = TypeVar("TResult")


@dataclass(frozen=True)
class Query:
    """
    Base class for Queries.

    Queries are:
    - Immutable (frozen dataclass)
    - Named descriptively (GetAllBooks, GetCatalogEntryByIsbn)
    - Have no side effects (read-only)
    """


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """
    Base class for Query Handlers.

    Query Handlers:
    - Execute a single query type
    - Return DTOs (not domain entities)
    - Have no side effects

    Query handlers don't need a Unit of Work since they don't modify state.
    """

    @abstractmethod
    async def handle(self, query: TQuery) -> TResult:
        """
        Handle the query and return the result.

        Query handlers should NOT:
        - Modify any state
        - Return domain entities directly
        """
        raise NotImplementedError
