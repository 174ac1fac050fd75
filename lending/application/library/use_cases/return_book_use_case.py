"""Use case for returning a borrowed book copy."""

from dataclasses import dataclass

import structlog

from lending.application.catalog.protocols.catalog_entry_repository import (
    CatalogEntryRepositoryProtocol,
)
from lending.application.common import Command, CommandHandler, UnitOfWork
from lending.application.library.protocols.book_repository import BookRepositoryProtocol
from lending.application.library.use_cases.dtos import BookDetailsDto
from lending.domain.catalog.exceptions import CatalogEntryNotFoundError
from lending.domain.common.value_objects import BookId, BorrowerId
from lending.domain.library.exceptions import (
    BookBorrowedByAnotherBorrowerError,
    BookNotBorrowedError,
    BookNotFoundError,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ReturnBookCommand(Command):
    book_id: str
    borrower_id: str


class ReturnBookCommandHandler(CommandHandler[ReturnBookCommand, BookDetailsDto]):
    """Takes a copy back from the borrower who holds it."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        catalog_entry_repository: CatalogEntryRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.book_repository = book_repository
        self.catalog_entry_repository = catalog_entry_repository
        self.unit_of_work = unit_of_work

    async def handle(self, command: ReturnBookCommand) -> BookDetailsDto:
        """
        Return a book copy.

        Raises:
            ValidationError: If either id is blank
            BookNotFoundError: If the book does not exist
            BookNotBorrowedError: If the copy is not out (checked first)
            BookBorrowedByAnotherBorrowerError: If someone else holds the copy
        """
        book_id = BookId.create(command.book_id)
        borrower_id = BorrowerId.create(command.borrower_id)

        async with self.unit_of_work:
            book = await self.book_repository.get_by_id(book_id)
            if book is None:
                raise BookNotFoundError(command.book_id)

            if book.borrower_id is None:
                raise BookNotBorrowedError(command.book_id)
            if book.borrower_id != borrower_id:
                raise BookBorrowedByAnotherBorrowerError(command.book_id, command.borrower_id)

            book.return_book()
            await self.unit_of_work.commit()

        catalog_entry = await self.catalog_entry_repository.get_by_isbn(book.isbn)
        if catalog_entry is None:
            raise CatalogEntryNotFoundError(book.isbn.value)

        logger.info("book_returned", book_id=book_id.value, borrower_id=borrower_id.value)
        return BookDetailsDto.from_domain(book, catalog_entry)
