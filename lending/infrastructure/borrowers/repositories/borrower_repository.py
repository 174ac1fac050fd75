import logging
from collections.abc import Sequence

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from lending.domain.borrowers.entities.borrower import Borrower
from lending.domain.common.value_objects import BorrowerId, EmailAddress
from lending.infrastructure.borrowers.mappers.borrower_mapper import BorrowerMapper
from lending.infrastructure.common.change_tracker import get_change_tracker
from lending.models import Borrower as BorrowerORM

logger = logging.getLogger(__name__)


def _key(orm_model: BorrowerORM) -> str:
    return orm_model.id


class BorrowerRepository:
    """Domain-centric repository for Borrower persistence."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.mapper = BorrowerMapper()
        self.tracker = get_change_tracker(db)

    async def get_by_id(self, borrower_id: BorrowerId) -> Borrower | None:
        staged = self.tracker.find(Borrower, borrower_id.value)
        if staged is not None:
            return staged

        stmt = select(BorrowerORM).where(BorrowerORM.id == borrower_id.value)
        orm_model = (await self.db.execute(stmt)).scalar_one_or_none()

        if not orm_model:
            return None

        return self.tracker.attach(orm_model, self.mapper, _key)

    async def get_all(self) -> Sequence[Borrower]:
        """Get all borrowers ordered by name."""
        stmt = select(BorrowerORM).order_by(BorrowerORM.name, BorrowerORM.id)
        orm_models = (await self.db.execute(stmt)).scalars().all()
        logger.debug("Loaded %d borrowers", len(orm_models))
        return [self.tracker.attach(orm_model, self.mapper, _key) for orm_model in orm_models]

    async def exists_by_id(self, borrower_id: BorrowerId) -> bool:
        stmt = select(exists().where(BorrowerORM.id == borrower_id.value))
        return bool((await self.db.execute(stmt)).scalar())

    async def exists_by_email(self, email_address: EmailAddress) -> bool:
        """Check uniqueness against the normalized (lowercase) address."""
        stmt = select(exists().where(BorrowerORM.email == email_address.value))
        return bool((await self.db.execute(stmt)).scalar())

    def add(self, borrower: Borrower) -> None:
        """Stage a new borrower; it is inserted when the unit of work commits."""
        self.tracker.stage(borrower, self.mapper, borrower.id.value)
