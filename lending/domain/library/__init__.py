"""Library bounded context: physical book copies and their loans."""

from .exceptions import (
    BookAlreadyBorrowedError,
    BookBorrowedByAnotherBorrowerError,
    BookNotBorrowedError,
    BookNotFoundError,
)
from .entities.book import Book
from .entities.book_with_catalog import BookWithCatalog

__all__ = [
    "Book",
    "BookAlreadyBorrowedError",
    "BookBorrowedByAnotherBorrowerError",
    "BookNotBorrowedError",
    "BookNotFoundError",
    "BookWithCatalog",
]
