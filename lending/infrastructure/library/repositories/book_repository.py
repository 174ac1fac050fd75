import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lending.domain.common.value_objects import BookId
from lending.domain.library.entities.book import Book
from lending.domain.library.entities.book_with_catalog import BookWithCatalog
from lending.infrastructure.catalog.mappers.catalog_entry_mapper import CatalogEntryMapper
from lending.infrastructure.common.change_tracker import get_change_tracker
from lending.infrastructure.library.mappers.book_mapper import BookMapper
from lending.models import Book as BookORM
from lending.models import CatalogEntry as CatalogEntryORM

logger = logging.getLogger(__name__)


def _book_key(orm_model: BookORM) -> str:
    return orm_model.id


def _catalog_entry_key(orm_model: CatalogEntryORM) -> str:
    return orm_model.isbn


class BookRepository:
    """Domain-centric repository for Book persistence."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.mapper = BookMapper()
        self.catalog_entry_mapper = CatalogEntryMapper()
        self.tracker = get_change_tracker(db)

    async def get_by_id(self, book_id: BookId) -> Book | None:
        """Find a book copy by id."""
        staged = self.tracker.find(Book, book_id.value)
        if staged is not None:
            return staged

        stmt = select(BookORM).where(BookORM.id == book_id.value)
        orm_model = (await self.db.execute(stmt)).scalar_one_or_none()

        if not orm_model:
            return None

        return self.tracker.attach(orm_model, self.mapper, _book_key)

    async def get_all(self) -> Sequence[Book]:
        stmt = select(BookORM).order_by(BookORM.isbn, BookORM.id)
        orm_models = (await self.db.execute(stmt)).scalars().all()
        return [self.tracker.attach(orm_model, self.mapper, _book_key) for orm_model in orm_models]

    async def get_all_with_catalog(self) -> Sequence[BookWithCatalog]:
        """
        Get every copy joined with its catalog entry.

        Ordered by ISBN, and within one ISBN available copies come before
        borrowed ones.
        """
        stmt = (
            select(BookORM, CatalogEntryORM)
            .join(CatalogEntryORM, CatalogEntryORM.isbn == BookORM.isbn)
            .order_by(BookORM.isbn, BookORM.borrowed_by.is_not(None), BookORM.id)
        )
        rows = (await self.db.execute(stmt)).all()
        logger.debug("Loaded %d books with catalog entries", len(rows))

        return [
            BookWithCatalog(
                book=self.tracker.attach(book_orm, self.mapper, _book_key),
                catalog_entry=self.tracker.attach(
                    catalog_orm, self.catalog_entry_mapper, _catalog_entry_key
                ),
            )
            for book_orm, catalog_orm in rows
        ]

    def add(self, book: Book) -> None:
        """Stage a new book copy; it is inserted when the unit of work commits."""
        self.tracker.stage(book, self.mapper, book.id.value)
