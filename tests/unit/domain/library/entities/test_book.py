from datetime import UTC, datetime

import pytest

from lending.domain.common.exceptions import ConflictError, ValidationError
from lending.domain.common.value_objects import BookId, BorrowerId, Isbn
from lending.domain.library.entities.book import Book
from lending.domain.library.exceptions import BookAlreadyBorrowedError, BookNotBorrowedError

ISBN = Isbn.create("9780134685991")


def _book() -> Book:
    return Book.register(BookId.create("BOOK-1"), ISBN)


def test_register_creates_available_book() -> None:
    book = _book()

    assert book.is_available
    assert book.borrower_id is None
    assert book.borrowed_on is None
    assert book.isbn == ISBN


def test_borrow_sets_borrower_and_date() -> None:
    book = _book()
    borrower_id = BorrowerId.create("BORROWER-1")
    before = datetime.now(UTC)

    book.borrow(borrower_id)

    assert not book.is_available
    assert book.borrower_id == borrower_id
    assert book.borrowed_on is not None
    assert book.borrowed_on >= before


def test_borrow_uses_given_date() -> None:
    borrowed_on = datetime(2024, 3, 1, 10, 0, tzinfo=UTC)
    book = _book().borrow(BorrowerId.create("B"), borrowed_on)
    assert book.borrowed_on == borrowed_on


def test_borrow_twice_raises_conflict() -> None:
    book = _book().borrow(BorrowerId.create("B"), datetime(2024, 3, 1, tzinfo=UTC))

    with pytest.raises(BookAlreadyBorrowedError) as exc_info:
        book.borrow(BorrowerId.create("OTHER"))

    assert isinstance(exc_info.value, ConflictError)
    assert "already borrowed since 2024-03-01" in exc_info.value.message
    assert book.borrower_id == BorrowerId.create("B")


def test_borrow_again_by_same_borrower_raises_conflict() -> None:
    borrower_id = BorrowerId.create("B")
    book = _book().borrow(borrower_id)

    with pytest.raises(BookAlreadyBorrowedError):
        book.borrow(borrower_id)


def test_return_clears_loan_state() -> None:
    book = _book().borrow(BorrowerId.create("B"))

    book.return_book()

    assert book.is_available
    assert book.borrower_id is None
    assert book.borrowed_on is None


def test_return_available_book_raises_conflict() -> None:
    with pytest.raises(BookNotBorrowedError, match="not currently borrowed"):
        _book().return_book()


def test_return_twice_raises_conflict() -> None:
    book = _book().borrow(BorrowerId.create("B"))
    book.return_book()

    with pytest.raises(BookNotBorrowedError):
        book.return_book()

    assert book.is_available


def test_copies_sharing_isbn_are_independent() -> None:
    first = Book.register(BookId.create("COPY-1"), ISBN)
    second = Book.register(BookId.create("COPY-2"), ISBN)

    first.borrow(BorrowerId.create("B"))

    assert not first.is_available
    assert second.is_available
    assert second.borrower_id is None
    assert second.borrowed_on is None


def test_isbn_cannot_be_reassigned() -> None:
    book = _book()
    with pytest.raises(AttributeError):
        book.isbn = Isbn.create("0804429570")


def test_reconstitute_requires_borrower_and_date_together() -> None:
    with pytest.raises(ValidationError):
        Book.reconstitute(BookId.create("X"), ISBN, BorrowerId.create("B"), None)


def test_equality_is_by_identity() -> None:
    """Test that two books with the same id are equal regardless of loan state."""
    first = _book()
    second = _book().borrow(BorrowerId.create("B"))
    other = Book.register(BookId.create("BOOK-2"), ISBN)

    assert first == second
    assert first != other
    assert len({first, second, other}) == 2
