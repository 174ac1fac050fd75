"""Fixtures for application handler tests."""

from itertools import count
from unittest.mock import MagicMock

import pytest

from lending.application.borrowers.protocols.borrower_repository import (
    BorrowerRepositoryProtocol,
)
from lending.application.catalog.protocols.catalog_entry_repository import (
    CatalogEntryRepositoryProtocol,
)
from lending.application.common import UnitOfWork
from lending.application.library.protocols.book_repository import BookRepositoryProtocol


class FakeUnitOfWork(UnitOfWork):
    """Records commits and rollbacks instead of touching a database."""

    def __init__(self) -> None:
        self.commits = 0
        self.rollbacks = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1


class SequentialIdGenerator:
    def __init__(self) -> None:
        self._counter = count(1)
        self.calls = 0

    def new(self) -> str:
        self.calls += 1
        return f"id-{next(self._counter)}"


@pytest.fixture
def unit_of_work() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def book_repository() -> MagicMock:
    repository = MagicMock(spec=BookRepositoryProtocol)
    repository.get_by_id.return_value = None
    repository.get_all_with_catalog.return_value = []
    return repository


@pytest.fixture
def borrower_repository() -> MagicMock:
    repository = MagicMock(spec=BorrowerRepositoryProtocol)
    repository.get_by_id.return_value = None
    repository.get_all.return_value = []
    repository.exists_by_id.return_value = False
    repository.exists_by_email.return_value = False
    return repository


@pytest.fixture
def catalog_entry_repository() -> MagicMock:
    repository = MagicMock(spec=CatalogEntryRepositoryProtocol)
    repository.get_by_isbn.return_value = None
    repository.exists_by_isbn.return_value = False
    return repository
