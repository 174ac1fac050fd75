from .email_address import EmailAddress
from .ids import BookId, BorrowerId
from .isbn import Isbn

__all__ = [
    "BookId",
    "BorrowerId",
    "EmailAddress",
    "Isbn",
]
