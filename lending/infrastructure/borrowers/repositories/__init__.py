"""Infrastructure layer repositories for borrowers bounded context."""

from lending.infrastructure.borrowers.repositories.borrower_repository import BorrowerRepository

__all__ = ["BorrowerRepository"]
