"""Use case for registering a book copy."""

from dataclasses import dataclass

import structlog

from lending.application.catalog.protocols.catalog_entry_repository import (
    CatalogEntryRepositoryProtocol,
)
from lending.application.common import (
    Command,
    CommandHandler,
    IdGeneratorProtocol,
    UnitOfWork,
)
from lending.application.library.protocols.book_repository import BookRepositoryProtocol
from lending.application.library.use_cases.dtos import BookDetailsDto
from lending.domain.catalog.entities.catalog_entry import CatalogEntry
from lending.domain.catalog.exceptions import CatalogEntryMetadataConflictError
from lending.domain.common.value_objects import BookId, Isbn
from lending.domain.library.entities.book import Book

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RegisterBookCommand(Command):
    isbn: str
    title: str
    author: str


def _ensure_metadata_matches(catalog_entry: CatalogEntry, title: str, author: str) -> None:
    """Raise when the provided title/author disagree with the catalog (case-insensitive)."""
    title_matches = catalog_entry.title.casefold() == (title or "").casefold()
    author_matches = catalog_entry.author.casefold() == (author or "").casefold()
    if not title_matches or not author_matches:
        raise CatalogEntryMetadataConflictError(
            isbn=catalog_entry.isbn.value,
            existing_title=catalog_entry.title,
            existing_author=catalog_entry.author,
            provided_title=title,
            provided_author=author,
        )


class RegisterBookCommandHandler(CommandHandler[RegisterBookCommand, BookDetailsDto]):
    """Registers a new physical copy, creating its catalog entry on first sight."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        catalog_entry_repository: CatalogEntryRepositoryProtocol,
        id_generator: IdGeneratorProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.book_repository = book_repository
        self.catalog_entry_repository = catalog_entry_repository
        self.id_generator = id_generator
        self.unit_of_work = unit_of_work

    async def handle(self, command: RegisterBookCommand) -> BookDetailsDto:
        """
        Register a book copy.

        Args:
            command: Raw ISBN, title and author of the copy

        Returns:
            The new copy with its catalog details

        Raises:
            ValidationError: If the ISBN is malformed, or title/author is blank
                for a new catalog entry
            CatalogEntryMetadataConflictError: If the ISBN is already cataloged
                with a different title or author
        """
        isbn = Isbn.create(command.isbn)

        async with self.unit_of_work:
            catalog_entry = await self.catalog_entry_repository.get_by_isbn(isbn)
            if catalog_entry is not None:
                _ensure_metadata_matches(catalog_entry, command.title, command.author)
            else:
                catalog_entry = CatalogEntry.create(isbn, command.title, command.author)
                self.catalog_entry_repository.add(catalog_entry)
                logger.debug("catalog_entry_created", isbn=isbn.value)

            book_id = BookId.create(self.id_generator.new())
            book = Book.register(book_id, isbn)

            self.book_repository.add(book)
            await self.unit_of_work.commit()

        logger.info("book_registered", book_id=book.id.value, isbn=isbn.value)
        return BookDetailsDto.from_domain(book, catalog_entry)
