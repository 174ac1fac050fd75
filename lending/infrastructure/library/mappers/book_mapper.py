from datetime import UTC, datetime

from lending.domain.common.value_objects import BookId, BorrowerId, Isbn
from lending.domain.library.entities.book import Book
from lending.models import Book as BookORM


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class BookMapper:
    """Mapper for Book ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: BookORM) -> Book:
        """Convert ORM model to domain entity."""
        return Book.reconstitute(
            id=BookId(orm_model.id),
            isbn=Isbn(orm_model.isbn),
            borrower_id=BorrowerId(orm_model.borrowed_by) if orm_model.borrowed_by else None,
            borrowed_on=_as_utc(orm_model.borrowed_on),
        )

    def to_orm(self, domain_entity: Book, orm_model: BookORM | None = None) -> BookORM:
        """Convert domain entity to ORM model."""
        borrowed_by = domain_entity.borrower_id.value if domain_entity.borrower_id else None

        if orm_model:
            # Update existing; only the loan state is mutable
            orm_model.borrowed_by = borrowed_by
            orm_model.borrowed_on = domain_entity.borrowed_on
            return orm_model

        # Create new
        return BookORM(
            id=domain_entity.id.value,
            isbn=domain_entity.isbn.value,
            borrowed_by=borrowed_by,
            borrowed_on=domain_entity.borrowed_on,
        )
