"""Use case for lending a book copy to a borrower."""

from dataclasses import dataclass

import structlog

from lending.application.borrowers.protocols.borrower_repository import (
    BorrowerRepositoryProtocol,
)
from lending.application.catalog.protocols.catalog_entry_repository import (
    CatalogEntryRepositoryProtocol,
)
from lending.application.common import Command, CommandHandler, UnitOfWork
from lending.application.library.protocols.book_repository import BookRepositoryProtocol
from lending.application.library.use_cases.dtos import BookDetailsDto
from lending.domain.borrowers.exceptions import BorrowerNotFoundError
from lending.domain.catalog.exceptions import CatalogEntryNotFoundError
from lending.domain.common.value_objects import BookId, BorrowerId
from lending.domain.library.exceptions import BookNotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class BorrowBookCommand(Command):
    book_id: str
    borrower_id: str


class BorrowBookCommandHandler(CommandHandler[BorrowBookCommand, BookDetailsDto]):
    """Lends an available copy to an existing borrower."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        borrower_repository: BorrowerRepositoryProtocol,
        catalog_entry_repository: CatalogEntryRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.book_repository = book_repository
        self.borrower_repository = borrower_repository
        self.catalog_entry_repository = catalog_entry_repository
        self.unit_of_work = unit_of_work

    async def handle(self, command: BorrowBookCommand) -> BookDetailsDto:
        """
        Borrow a book copy.

        The book is looked up before the borrower, so a request naming two
        unknown ids reports the missing book.

        Raises:
            ValidationError: If either id is blank
            BookNotFoundError: If the book does not exist
            BorrowerNotFoundError: If the borrower does not exist
            BookAlreadyBorrowedError: If the copy is already borrowed
        """
        book_id = BookId.create(command.book_id)
        borrower_id = BorrowerId.create(command.borrower_id)

        async with self.unit_of_work:
            book = await self.book_repository.get_by_id(book_id)
            if book is None:
                raise BookNotFoundError(command.book_id)

            if not await self.borrower_repository.exists_by_id(borrower_id):
                raise BorrowerNotFoundError(command.borrower_id)

            book.borrow(borrower_id)
            await self.unit_of_work.commit()

        catalog_entry = await self.catalog_entry_repository.get_by_isbn(book.isbn)
        if catalog_entry is None:
            raise CatalogEntryNotFoundError(book.isbn.value)

        logger.info("book_borrowed", book_id=book_id.value, borrower_id=borrower_id.value)
        return BookDetailsDto.from_domain(book, catalog_entry)
