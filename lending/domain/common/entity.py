"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Example:
    @dataclass(eq=False)
    class Borrower(Entity[BorrowerId]):
        id: BorrowerId
        name: str
        email_address: EmailAddress

        def update_name(self, name: str) -> "Borrower":
            self.name = name
            return self
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .exceptions import ValidationError
from .value_object import ValueObject


@dataclass(frozen=True, eq=False)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects that wrap a non-blank string, normalized
    to uppercase. They provide type safety to prevent mixing up IDs of
    different entities.

    Example:
        @dataclass(frozen=True, eq=False)
        class BookId(EntityId):
            pass

        book_id = BookId.create("01hx")
        borrower_id = BorrowerId.create("01hx")
        # These are different types and never compare equal
    """

    value: str

    @classmethod
    def create(cls, raw: str | None) -> Self:
        """Validate and normalize a raw identifier."""
        if raw is None or not raw.strip():
            raise ValidationError(
                f"{cls.__name__} must not be empty", field=cls.__name__, value=raw
            )
        return cls(raw.upper())

    def __str__(self) -> str:
        return self.value

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return self.value


IdType = TypeVar("IdType", bound=ValueObject)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Have lifecycle (created, modified)

    Subclasses must expose an ``id`` of type IdType and be declared with
    ``@dataclass(eq=False)`` so identity equality is kept.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
