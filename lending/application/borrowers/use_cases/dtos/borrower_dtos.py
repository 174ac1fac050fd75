"""DTOs for borrower use cases."""

from dataclasses import dataclass

from lending.domain.borrowers.entities.borrower import Borrower


@dataclass(frozen=True)
class BorrowerDto:
    """DTO for a registered borrower."""

    id: str
    name: str
    email: str

    @classmethod
    def from_domain(cls, borrower: Borrower) -> "BorrowerDto":
        return cls(
            id=borrower.id.value,
            name=borrower.name,
            email=borrower.email_address.value,
        )
