"""Use case for borrower registration."""

from dataclasses import dataclass

import structlog

from lending.application.borrowers.protocols.borrower_repository import (
    BorrowerRepositoryProtocol,
)
from lending.application.borrowers.use_cases.dtos import BorrowerDto
from lending.application.common import (
    Command,
    CommandHandler,
    IdGeneratorProtocol,
    UnitOfWork,
)
from lending.domain.borrowers.entities.borrower import Borrower
from lending.domain.borrowers.exceptions import EmailAlreadyRegisteredError
from lending.domain.common.value_objects import BorrowerId, EmailAddress

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RegisterBorrowerCommand(Command):
    name: str
    email: str


class RegisterBorrowerCommandHandler(CommandHandler[RegisterBorrowerCommand, BorrowerDto]):
    """Registers a new library member."""

    def __init__(
        self,
        borrower_repository: BorrowerRepositoryProtocol,
        id_generator: IdGeneratorProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.borrower_repository = borrower_repository
        self.id_generator = id_generator
        self.unit_of_work = unit_of_work

    async def handle(self, command: RegisterBorrowerCommand) -> BorrowerDto:
        """
        Register a new borrower.

        The email address is validated and checked for uniqueness before an
        id is generated, so a duplicate email is reported even when the
        name is blank as well.

        Args:
            command: Name and raw email of the new borrower

        Returns:
            The registered borrower

        Raises:
            ValidationError: If the email is malformed or the name is blank
            EmailAlreadyRegisteredError: If another borrower uses this email
        """
        email_address = EmailAddress.create(command.email)

        async with self.unit_of_work:
            if await self.borrower_repository.exists_by_email(email_address):
                raise EmailAlreadyRegisteredError(email_address.value)

            borrower_id = BorrowerId.create(self.id_generator.new())
            borrower = Borrower.register(borrower_id, command.name, email_address)

            self.borrower_repository.add(borrower)
            await self.unit_of_work.commit()

        logger.info(
            "borrower_registered",
            borrower_id=borrower.id.value,
            email=borrower.email_address.value,
        )
        return BorrowerDto.from_domain(borrower)
