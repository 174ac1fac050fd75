from dataclasses import dataclass

from lending.domain.common.entity import Entity
from lending.domain.common.exceptions import ValidationError
from lending.domain.common.value_objects import Isbn


@dataclass(eq=False)
class CatalogEntry(Entity[Isbn]):
    """
    Catalog entry aggregate root.

    The bibliographic record (ISBN, title, author) shared by every physical
    copy carrying that ISBN. The ISBN is the natural key and never changes.
    """

    isbn: Isbn
    title: str
    author: str

    def __setattr__(self, name: str, value: object) -> None:
        if name == "isbn" and "isbn" in self.__dict__:
            raise AttributeError("CatalogEntry ISBN cannot be changed after creation")
        super().__setattr__(name, value)

    @property
    def id(self) -> Isbn:  # type: ignore[override]
        return self.isbn

    # Command methods
    def update_title(self, title: str) -> "CatalogEntry":
        """Replace the title; no-op when unchanged."""
        if self.title != title:
            self.title = title
        return self

    def update_author(self, author: str) -> "CatalogEntry":
        """Replace the author; no-op when unchanged."""
        if self.author != author:
            self.author = author
        return self

    # Factory methods
    @classmethod
    def create(cls, isbn: Isbn | str, title: str, author: str) -> "CatalogEntry":
        """
        Factory for creating a new catalog entry.

        Args:
            isbn: A parsed Isbn, or a raw string that is parsed first
            title: Book title, must not be blank
            author: Book author, must not be blank

        Raises:
            ValidationError: If the ISBN is malformed or title/author is blank
        """
        if not isinstance(isbn, Isbn):
            isbn = Isbn.create(isbn)

        if not title or not title.strip():
            raise ValidationError("Title must not be empty", field="title", value=title)
        if not author or not author.strip():
            raise ValidationError("Author must not be empty", field="author", value=author)

        return cls(isbn=isbn, title=title, author=author)

    @classmethod
    def reconstitute(cls, isbn: Isbn, title: str, author: str) -> "CatalogEntry":
        """Factory for reconstituting a catalog entry from persistence."""
        return cls(isbn=isbn, title=title, author=author)
