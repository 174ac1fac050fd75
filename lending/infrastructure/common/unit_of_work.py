"""SQLAlchemy implementation of the unit of work port."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from lending.application.common import UnitOfWork
from lending.infrastructure.common.change_tracker import get_change_tracker

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of work over a request-scoped ``AsyncSession``.

    Repositories built on the same session stage aggregates in the session's
    change tracker. ``commit`` writes every tracked aggregate back to its row,
    inserting new rows in staging order, and commits the transaction.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def commit(self) -> None:
        tracker = get_change_tracker(self.db)
        for tracked in tracker.pending():
            if tracked.is_new:
                tracked.row = tracked.mapper.to_orm(tracked.aggregate)
                self.db.add(tracked.row)
                # Flush per insert so referenced rows exist before their referrers
                await self.db.flush()
            else:
                tracked.mapper.to_orm(tracked.aggregate, tracked.row)

        await self.db.commit()
        logger.debug("Committed unit of work with %d tracked aggregates", len(tracker))

    async def rollback(self) -> None:
        get_change_tracker(self.db).clear()
        await self.db.rollback()
