"""
Command and CommandHandler base classes.

Commands represent intentions to change the system state.
They are named in imperative form: RegisterBook, BorrowBook, etc.

Example:
    @dataclass(frozen=True)
    class BorrowBookCommand(Command):
        book_id: str
        borrower_id: str

    class BorrowBookCommandHandler(CommandHandler[BorrowBookCommand, BookDetailsDto]):
        def __init__(self, book_repository: BookRepositoryProtocol, unit_of_work: UnitOfWork):
            self.book_repository = book_repository
            self.unit_of_work = unit_of_work

        async def handle(self, command: BorrowBookCommand) -> BookDetailsDto:
            async with self.unit_of_work:
                book = await self.book_repository.get_by_id(BookId.create(command.book_id))
                book.borrow(BorrowerId.create(command.borrower_id))
                await self.unit_of_work.commit()
            ...
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

# Input type (the command)
TCommand = TypeVar("TCommand", bound="Command")
# Output type (the result of handling the command)
TResult = TypeVar("TResult")


@dataclass(frozen=True)
class Command:
    """
    Base class for Commands.

    Commands are:
    - Immutable (frozen dataclass)
    - Named in imperative form (RegisterBook, not BookRegistration)
    - Carry the raw input needed to execute the operation
    - Represent intentions, not facts

    Commands carry primitives; handlers turn them into value objects so
    validation failures surface from the domain.
    """


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """
    Base class for Command Handlers.

    Command Handlers:
    - Execute a single command type
    - Orchestrate domain logic
    - Manage transactions (via Unit of Work)
    - Return a DTO describing the outcome

    Each command should have exactly one handler.
    """

    @abstractmethod
    async def handle(self, command: TCommand) -> TResult:
        """
        Handle the command and return the result.

        This method should:
        1. Validate input by building value objects
        2. Load aggregates and check existence
        3. Execute domain logic
        4. Stage changes (via repositories)
        5. Commit the transaction (via Unit of Work)
        6. Return the result

        Raises:
            DomainError: When input is invalid, an aggregate is missing,
                or an invariant is violated
        """
        raise NotImplementedError
