"""Borrower entity for library membership."""

from dataclasses import dataclass

from lending.domain.common.entity import Entity
from lending.domain.common.exceptions import ValidationError
from lending.domain.common.value_objects import BorrowerId, EmailAddress


@dataclass(eq=False)
class Borrower(Entity[BorrowerId]):
    """
    Borrower entity representing a registered library member.

    Business Rules:
    - Name must be non-empty at registration
    - Email must be unique (checked by the registration use case)
    """

    id: BorrowerId
    name: str
    email_address: EmailAddress

    def update_name(self, name: str) -> "Borrower":
        """
        Update the borrower's name.

        Args:
            name: The new name

        Returns:
            This borrower, for chaining
        """
        if self.name != name:
            self.name = name
        return self

    def update_email_address(self, email_address: EmailAddress) -> "Borrower":
        """
        Update the borrower's email address.

        Args:
            email_address: The new, already validated address

        Returns:
            This borrower, for chaining
        """
        if self.email_address != email_address:
            self.email_address = email_address
        return self

    @classmethod
    def register(cls, id: BorrowerId, name: str, email_address: EmailAddress) -> "Borrower":
        """
        Register a new borrower.

        Args:
            id: Identifier assigned by the id generator
            name: Borrower's name
            email_address: Borrower's validated email address

        Returns:
            New Borrower instance

        Raises:
            ValidationError: If name is blank
        """
        if not name or not name.strip():
            raise ValidationError("Name must not be empty", field="name", value=name)
        return cls(id=id, name=name, email_address=email_address)

    @classmethod
    def reconstitute(cls, id: BorrowerId, name: str, email_address: EmailAddress) -> "Borrower":
        """Reconstitute a borrower from persistence."""
        return cls(id=id, name=name, email_address=email_address)
