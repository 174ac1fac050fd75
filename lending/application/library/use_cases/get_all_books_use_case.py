"""Use case for listing book copies."""

from dataclasses import dataclass

from lending.application.common import Query, QueryHandler
from lending.application.library.protocols.book_repository import BookRepositoryProtocol
from lending.application.library.use_cases.dtos import BookDetailsDto


@dataclass(frozen=True)
class GetAllBooksQuery(Query):
    pass


class GetAllBooksQueryHandler(QueryHandler[GetAllBooksQuery, tuple[BookDetailsDto, ...]]):
    """Lists every copy together with its catalog entry."""

    def __init__(self, book_repository: BookRepositoryProtocol) -> None:
        self.book_repository = book_repository

    async def handle(self, query: GetAllBooksQuery) -> tuple[BookDetailsDto, ...]:
        books_with_catalog = await self.book_repository.get_all_with_catalog()
        return tuple(BookDetailsDto.from_read_model(item) for item in books_with_catalog)
