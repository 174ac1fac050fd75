"""
Per-session tracking of aggregates loaded or staged through repositories.

Aggregates are plain domain objects that mutate in place; the ORM rows they
were mapped from are not touched until the unit of work commits. The
tracker keeps each aggregate next to its row (if any) and its mapper so
that commit can copy aggregate state onto rows in staging order.
"""

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from lending.database import Base

SESSION_INFO_KEY = "change_tracker"

TAggregate = TypeVar("TAggregate")
TRow = TypeVar("TRow", bound=Base)


class AggregateMapper(Protocol[TAggregate, TRow]):
    def to_domain(self, orm_model: TRow) -> TAggregate: ...

    def to_orm(self, domain_entity: TAggregate, orm_model: TRow | None = None) -> TRow: ...


@dataclass
class TrackedAggregate:
    """An aggregate, the row it maps to, and the mapper between them."""

    aggregate: Any
    mapper: AggregateMapper[Any, Any]
    row: Base | None = None

    @property
    def is_new(self) -> bool:
        return self.row is None


class ChangeTracker:
    """Identity map of aggregates for one database session."""

    def __init__(self) -> None:
        self._tracked: dict[tuple[type, Hashable], TrackedAggregate] = {}

    def __len__(self) -> int:
        return len(self._tracked)

    def find(self, aggregate_type: type[TAggregate], key: Hashable) -> TAggregate | None:
        tracked = self._tracked.get((aggregate_type, key))
        return tracked.aggregate if tracked else None

    def attach(
        self,
        row: TRow,
        mapper: AggregateMapper[TAggregate, TRow],
        key_of: Callable[[TRow], Hashable],
    ) -> TAggregate:
        """
        Return the aggregate for a loaded row.

        A row seen before in this session yields the already tracked
        aggregate, so pending in-memory changes are never overwritten by a
        second read.
        """
        aggregate = mapper.to_domain(row)
        key = (type(aggregate), key_of(row))
        tracked = self._tracked.get(key)
        if tracked is not None:
            return tracked.aggregate

        self._tracked[key] = TrackedAggregate(aggregate=aggregate, mapper=mapper, row=row)
        return aggregate

    def stage(self, aggregate: Any, mapper: AggregateMapper[Any, Any], key: Hashable) -> None:
        """Register a new aggregate to be inserted on commit."""
        self._tracked[(type(aggregate), key)] = TrackedAggregate(aggregate=aggregate, mapper=mapper)

    def pending(self) -> list[TrackedAggregate]:
        """Tracked aggregates in the order they were loaded or staged."""
        return list(self._tracked.values())

    def clear(self) -> None:
        self._tracked.clear()


def get_change_tracker(session: AsyncSession) -> ChangeTracker:
    """Get the change tracker bound to a session, creating it on first use."""
    tracker = session.info.get(SESSION_INFO_KEY)
    if tracker is None:
        tracker = ChangeTracker()
        session.info[SESSION_INFO_KEY] = tracker
    return tracker
