"""Library domain exceptions."""

from datetime import datetime

from lending.domain.common.exceptions import ConflictError, EntityNotFoundError


class BookNotFoundError(EntityNotFoundError):
    """Raised when a book copy cannot be found."""

    def __init__(self, book_id: str) -> None:
        super().__init__("Book", book_id)


class BookAlreadyBorrowedError(ConflictError):
    """Raised when borrowing a copy that is already out."""

    def __init__(self, borrowed_on: datetime | None) -> None:
        since = f" since {borrowed_on:%Y-%m-%d}" if borrowed_on else ""
        super().__init__("book_available", f"Book is already borrowed{since}")
        self.borrowed_on = borrowed_on


class BookNotBorrowedError(ConflictError):
    """Raised when returning a copy that is not out."""

    def __init__(self, book_id: str | None = None) -> None:
        subject = f"Book with id '{book_id}'" if book_id else "Book"
        super().__init__(
            "book_borrowed", f"{subject} is not currently borrowed and cannot be returned"
        )
        self.book_id = book_id


class BookBorrowedByAnotherBorrowerError(ConflictError):
    """Raised when a borrower tries to return a copy someone else holds."""

    def __init__(self, book_id: str, borrower_id: str) -> None:
        super().__init__(
            "book_returned_by_holder",
            f"Book with id '{book_id}' was not borrowed by borrower '{borrower_id}'",
        )
        self.book_id = book_id
        self.borrower_id = borrower_id
