"""Borrower domain exceptions."""

from lending.domain.common.exceptions import ConflictError, EntityNotFoundError


class BorrowerNotFoundError(EntityNotFoundError):
    """Raised when a borrower cannot be found."""

    def __init__(self, borrower_id: str) -> None:
        super().__init__("Borrower", borrower_id)


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when registering a borrower with an email that is already taken."""

    def __init__(self, email: str) -> None:
        super().__init__(
            "unique_borrower_email",
            f"A borrower with email address '{email}' is already registered",
        )
        self.email = email
