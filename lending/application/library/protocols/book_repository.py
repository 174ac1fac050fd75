from collections.abc import Sequence
from typing import Protocol

from lending.domain.common.value_objects import BookId
from lending.domain.library.entities.book import Book
from lending.domain.library.entities.book_with_catalog import BookWithCatalog


class BookRepositoryProtocol(Protocol):
    async def get_by_id(self, book_id: BookId) -> Book | None: ...

    async def get_all(self) -> Sequence[Book]: ...

    async def get_all_with_catalog(self) -> Sequence[BookWithCatalog]: ...

    def add(self, book: Book) -> None: ...
