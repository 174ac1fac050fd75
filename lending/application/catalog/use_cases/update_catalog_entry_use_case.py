"""Use case for correcting catalog metadata."""

from dataclasses import dataclass

import structlog

from lending.application.catalog.protocols.catalog_entry_repository import (
    CatalogEntryRepositoryProtocol,
)
from lending.application.catalog.use_cases.dtos import CatalogEntryDetailsDto
from lending.application.common import Command, CommandHandler, UnitOfWork
from lending.domain.catalog.exceptions import CatalogEntryNotFoundError
from lending.domain.common.exceptions import ValidationError
from lending.domain.common.value_objects import Isbn

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class UpdateCatalogEntryCommand(Command):
    isbn: str
    title: str
    author: str


class UpdateCatalogEntryCommandHandler(
    CommandHandler[UpdateCatalogEntryCommand, CatalogEntryDetailsDto]
):
    """Replaces the title and author of an existing catalog entry."""

    def __init__(
        self,
        catalog_entry_repository: CatalogEntryRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.catalog_entry_repository = catalog_entry_repository
        self.unit_of_work = unit_of_work

    async def handle(self, command: UpdateCatalogEntryCommand) -> CatalogEntryDetailsDto:
        """
        Update a catalog entry.

        Title and author are checked before the ISBN is parsed.

        Raises:
            ValidationError: If title or author is blank, or the ISBN is malformed
            CatalogEntryNotFoundError: If no entry has this ISBN
        """
        if not command.title or not command.title.strip():
            raise ValidationError("Title must not be empty", field="title", value=command.title)
        if not command.author or not command.author.strip():
            raise ValidationError(
                "Author must not be empty", field="author", value=command.author
            )

        isbn = Isbn.create(command.isbn)

        async with self.unit_of_work:
            catalog_entry = await self.catalog_entry_repository.get_by_isbn(isbn)
            if catalog_entry is None:
                raise CatalogEntryNotFoundError(command.isbn)

            catalog_entry.update_title(command.title).update_author(command.author)
            await self.unit_of_work.commit()

        logger.info("catalog_entry_updated", isbn=isbn.value)
        return CatalogEntryDetailsDto.from_domain(catalog_entry)
