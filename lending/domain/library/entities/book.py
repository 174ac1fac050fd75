from dataclasses import dataclass
from datetime import UTC, datetime

from lending.domain.common.entity import Entity
from lending.domain.common.exceptions import ValidationError
from lending.domain.common.value_objects import BookId, BorrowerId, Isbn
from lending.domain.library.exceptions import BookAlreadyBorrowedError, BookNotBorrowedError


@dataclass(eq=False)
class Book(Entity[BookId]):
    """
    Book aggregate root.

    Represents one physical copy of a catalog entry. The catalog entry is
    referenced by ISBN only; many copies may share the same ISBN and each
    one is borrowed and returned independently.

    States: available (no borrower) and borrowed. ``borrower_id`` and
    ``borrowed_on`` are always set together.
    """

    # Identity
    id: BookId
    isbn: Isbn

    # Loan state
    borrower_id: BorrowerId | None = None
    borrowed_on: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if (self.borrower_id is None) != (self.borrowed_on is None):
            raise ValidationError(
                "Book borrower and borrowed-on date must be set together",
                field="borrower_id",
                value=self.borrower_id,
            )

    def __setattr__(self, name: str, value: object) -> None:
        if name == "isbn" and "isbn" in self.__dict__:
            raise AttributeError("Book ISBN cannot be changed after registration")
        super().__setattr__(name, value)

    # Query methods
    @property
    def is_available(self) -> bool:
        """Whether this copy can be borrowed."""
        return self.borrower_id is None

    # Command methods
    def borrow(self, borrower_id: BorrowerId, borrowed_on: datetime | None = None) -> "Book":
        """
        Lend this copy to a borrower.

        Args:
            borrower_id: Who takes the copy
            borrowed_on: When the loan started, defaults to now (UTC)

        Raises:
            BookAlreadyBorrowedError: If the copy is already borrowed, even by
                the same borrower
        """
        if not self.is_available:
            raise BookAlreadyBorrowedError(self.borrowed_on)

        self.borrower_id = borrower_id
        self.borrowed_on = borrowed_on or datetime.now(UTC)
        return self

    def return_book(self) -> "Book":
        """
        Take this copy back into the library.

        Raises:
            BookNotBorrowedError: If the copy is not currently borrowed
        """
        if self.is_available:
            raise BookNotBorrowedError()

        self.borrower_id = None
        self.borrowed_on = None
        return self

    # Factory methods
    @classmethod
    def register(cls, id: BookId, isbn: Isbn) -> "Book":
        """Factory for registering a new, available copy."""
        return cls(id=id, isbn=isbn)

    @classmethod
    def reconstitute(
        cls,
        id: BookId,
        isbn: Isbn,
        borrower_id: BorrowerId | None,
        borrowed_on: datetime | None,
    ) -> "Book":
        """Factory for reconstituting a book from persistence."""
        return cls(id=id, isbn=isbn, borrower_id=borrower_id, borrowed_on=borrowed_on)
