"""Borrowers bounded context: registered library members."""

from .exceptions import BorrowerNotFoundError, EmailAlreadyRegisteredError
from .entities.borrower import Borrower

__all__ = [
    "Borrower",
    "BorrowerNotFoundError",
    "EmailAlreadyRegisteredError",
]
