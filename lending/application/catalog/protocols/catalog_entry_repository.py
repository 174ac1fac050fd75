from collections.abc import Iterable, Sequence
from typing import Protocol

from lending.domain.catalog.entities.catalog_entry import CatalogEntry
from lending.domain.common.value_objects import Isbn


class CatalogEntryRepositoryProtocol(Protocol):
    async def get_by_isbn(self, isbn: Isbn) -> CatalogEntry | None: ...

    async def get_by_isbns(self, isbns: Iterable[Isbn]) -> Sequence[CatalogEntry]: ...

    async def exists_by_isbn(self, isbn: Isbn) -> bool: ...

    def add(self, catalog_entry: CatalogEntry) -> None: ...
