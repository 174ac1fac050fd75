from collections.abc import Iterable, Sequence

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from lending.domain.catalog.entities.catalog_entry import CatalogEntry
from lending.domain.common.value_objects import Isbn
from lending.infrastructure.catalog.mappers.catalog_entry_mapper import CatalogEntryMapper
from lending.infrastructure.common.change_tracker import get_change_tracker
from lending.models import CatalogEntry as CatalogEntryORM


def _key(orm_model: CatalogEntryORM) -> str:
    return orm_model.isbn


class CatalogEntryRepository:
    """Domain-centric repository for CatalogEntry persistence."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.mapper = CatalogEntryMapper()
        self.tracker = get_change_tracker(db)

    async def get_by_isbn(self, isbn: Isbn) -> CatalogEntry | None:
        """Find a catalog entry by its normalized ISBN."""
        staged = self.tracker.find(CatalogEntry, isbn.value)
        if staged is not None:
            return staged

        stmt = select(CatalogEntryORM).where(CatalogEntryORM.isbn == isbn.value)
        orm_model = (await self.db.execute(stmt)).scalar_one_or_none()

        if not orm_model:
            return None

        return self.tracker.attach(orm_model, self.mapper, _key)

    async def get_by_isbns(self, isbns: Iterable[Isbn]) -> Sequence[CatalogEntry]:
        """Batch lookup; unknown ISBNs are simply absent from the result."""
        values = {isbn.value for isbn in isbns}
        if not values:
            return []

        stmt = (
            select(CatalogEntryORM)
            .where(CatalogEntryORM.isbn.in_(values))
            .order_by(CatalogEntryORM.isbn)
        )
        orm_models = (await self.db.execute(stmt)).scalars().all()
        return [self.tracker.attach(orm_model, self.mapper, _key) for orm_model in orm_models]

    async def exists_by_isbn(self, isbn: Isbn) -> bool:
        stmt = select(exists().where(CatalogEntryORM.isbn == isbn.value))
        return bool((await self.db.execute(stmt)).scalar())

    def add(self, catalog_entry: CatalogEntry) -> None:
        """Stage a new catalog entry; it is inserted when the unit of work commits."""
        self.tracker.stage(catalog_entry, self.mapper, catalog_entry.isbn.value)
