"""
Unit of Work interface.

The Unit of Work pattern maintains a list of objects affected by a business
transaction and coordinates the writing out of changes. Repositories only
stage additions and mutations; nothing becomes durable until ``commit``.

Example:
    class RegisterBookCommandHandler(CommandHandler[RegisterBookCommand, BookDetailsDto]):
        async def handle(self, command: RegisterBookCommand) -> BookDetailsDto:
            async with self.unit_of_work:
                book = Book.register(book_id, isbn)
                self.book_repository.add(book)
                await self.unit_of_work.commit()
                return BookDetailsDto.from_domain(book, catalog_entry)
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    The Unit of Work:
    - Manages database transactions
    - Applies every staged change of a request atomically
    - Can be used as an async context manager

    Infrastructure layer provides concrete implementations
    (e.g., SqlAlchemyUnitOfWork).
    """

    @abstractmethod
    async def commit(self) -> None:
        """
        Commit the current transaction.

        This persists all changes staged within the unit of work. If the
        commit fails, none of the staged changes take effect.
        """
        raise NotImplementedError

    @abstractmethod
    async def rollback(self) -> None:
        """
        Rollback the current transaction.

        This discards all changes staged within the unit of work.
        """
        raise NotImplementedError

    async def __aenter__(self) -> Self:
        """Enter the unit of work context."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred (cancellation included), rollback.
        Otherwise, do nothing (commit must be called explicitly).
        """
        if exc_type is not None:
            await self.rollback()
