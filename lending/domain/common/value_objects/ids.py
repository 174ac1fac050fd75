from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True, eq=False)
class BookId(EntityId):
    """Strongly-typed identifier of a physical book copy."""


@dataclass(frozen=True, eq=False)
class BorrowerId(EntityId):
    """Strongly-typed borrower identifier."""
