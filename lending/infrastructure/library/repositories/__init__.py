"""Infrastructure layer repositories for library bounded context."""

from lending.infrastructure.library.repositories.book_repository import BookRepository

__all__ = ["BookRepository"]
