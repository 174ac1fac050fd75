"""Tests for SQLAlchemy repositories and the change-tracking unit of work."""

import logging
from datetime import UTC, datetime

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from lending.domain.borrowers.entities.borrower import Borrower
from lending.domain.catalog.entities.catalog_entry import CatalogEntry
from lending.domain.common.value_objects import BookId, BorrowerId, EmailAddress, Isbn
from lending.domain.library.entities.book import Book
from lending.infrastructure.borrowers.repositories import BorrowerRepository
from lending.infrastructure.catalog.repositories import CatalogEntryRepository
from lending.infrastructure.common.change_tracker import get_change_tracker
from lending.infrastructure.common.unit_of_work import SqlAlchemyUnitOfWork
from lending.infrastructure.library.repositories import BookRepository
from lending.models import Book as BookORM

ISBN_A = Isbn.create("9780134685991")
ISBN_B = Isbn.create("0804429570")


async def _seed(session_factory) -> None:
    async with session_factory() as db:
        catalog = CatalogEntryRepository(db)
        books = BookRepository(db)
        borrowers = BorrowerRepository(db)
        catalog.add(CatalogEntry.create(ISBN_B, "Zen", "Pirsig"))
        catalog.add(CatalogEntry.create(ISBN_A, "Effective Java", "Joshua Bloch"))
        borrowers.add(
            Borrower.register(BorrowerId.create("B1"), "Ada", EmailAddress.create("ada@x.org"))
        )
        books.add(Book.register(BookId.create("A-1"), ISBN_A))
        books.add(
            Book.register(BookId.create("A-2"), ISBN_A).borrow(
                BorrowerId.create("B1"), datetime(2024, 1, 2, tzinfo=UTC)
            )
        )
        books.add(Book.register(BookId.create("A-3"), ISBN_A))
        books.add(Book.register(BookId.create("B-1"), ISBN_B))
        await SqlAlchemyUnitOfWork(db).commit()


async def test_staged_aggregates_are_not_visible_until_commit(session_factory) -> None:
    async with session_factory() as db:
        CatalogEntryRepository(db).add(CatalogEntry.create(ISBN_A, "Effective Java", "Bloch"))

        async with session_factory() as other:
            assert await CatalogEntryRepository(other).exists_by_isbn(ISBN_A) is False

        await SqlAlchemyUnitOfWork(db).commit()

    async with session_factory() as other:
        assert await CatalogEntryRepository(other).exists_by_isbn(ISBN_A) is True


async def test_in_place_mutation_is_persisted_on_commit(session_factory) -> None:
    await _seed(session_factory)

    async with session_factory() as db:
        async with SqlAlchemyUnitOfWork(db) as uow:
            book = await BookRepository(db).get_by_id(BookId.create("A-1"))
            assert book is not None
            book.borrow(BorrowerId.create("B1"))
            await uow.commit()

    async with session_factory() as db:
        reloaded = await BookRepository(db).get_by_id(BookId.create("A-1"))
        assert reloaded is not None
        assert reloaded.borrower_id == BorrowerId.create("B1")
        assert reloaded.borrowed_on is not None
        assert reloaded.borrowed_on.tzinfo is not None


async def test_rollback_discards_mutations(session_factory) -> None:
    await _seed(session_factory)

    async with session_factory() as db:
        with pytest.raises(RuntimeError):
            async with SqlAlchemyUnitOfWork(db):
                book = await BookRepository(db).get_by_id(BookId.create("A-1"))
                assert book is not None
                book.borrow(BorrowerId.create("B1"))
                raise RuntimeError("abort")

        assert len(get_change_tracker(db)) == 0

    async with session_factory() as db:
        row = (await db.execute(select(BookORM).where(BookORM.id == "A-1"))).scalar_one()
        assert row.borrowed_by is None


async def test_failed_commit_leaves_no_partial_writes(session_factory) -> None:
    await _seed(session_factory)

    async with session_factory() as db:
        catalog = CatalogEntryRepository(db)
        borrowers = BorrowerRepository(db)
        with pytest.raises(IntegrityError):
            async with SqlAlchemyUnitOfWork(db) as uow:
                catalog.add(CatalogEntry.create("9781111111111", "New", "Author"))
                # Duplicate email violates the unique constraint at flush time
                borrowers.add(
                    Borrower.register(
                        BorrowerId.create("B2"), "Imposter", EmailAddress.create("ada@x.org")
                    )
                )
                await uow.commit()

    async with session_factory() as db:
        repository = CatalogEntryRepository(db)
        assert await repository.exists_by_isbn(Isbn.create("9781111111111")) is False


async def test_same_aggregate_returned_within_session(session_factory) -> None:
    await _seed(session_factory)

    async with session_factory() as db:
        repository = BookRepository(db)
        first = await repository.get_by_id(BookId.create("A-1"))
        assert first is not None
        first.borrow(BorrowerId.create("B1"))

        second = await repository.get_by_id(BookId.create("A-1"))
        assert second is first
        assert second.borrower_id == BorrowerId.create("B1")


async def test_get_all_with_catalog_orders_by_isbn_then_availability(session_factory) -> None:
    await _seed(session_factory)

    async with session_factory() as db:
        result = await BookRepository(db).get_all_with_catalog()

    assert [item.book.id.value for item in result] == ["B-1", "A-1", "A-3", "A-2"]
    assert result[0].catalog_entry.title == "Zen"
    assert result[-1].book.borrower_id == BorrowerId.create("B1")


async def test_catalog_entry_batch_lookup(session_factory) -> None:
    await _seed(session_factory)

    async with session_factory() as db:
        repository = CatalogEntryRepository(db)
        entries = await repository.get_by_isbns([ISBN_A, Isbn.create("9789999999999")])
        assert [entry.isbn for entry in entries] == [ISBN_A]
        assert await repository.get_by_isbns([]) == []


async def test_borrower_queries(session_factory) -> None:
    await _seed(session_factory)

    async with session_factory() as db:
        repository = BorrowerRepository(db)
        assert await repository.exists_by_id(BorrowerId.create("B1")) is True
        assert await repository.exists_by_id(BorrowerId.create("B9")) is False
        assert await repository.exists_by_email(EmailAddress.create("ADA@x.org")) is True

        borrower = await repository.get_by_id(BorrowerId.create("B1"))
        assert borrower is not None
        assert borrower.email_address == EmailAddress.create("ada@x.org")
        assert [b.name for b in await repository.get_all()] == ["Ada"]


async def test_debug_messages_use_lazy_arguments(session_factory, caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="lending.infrastructure"):
        await _seed(session_factory)
        async with session_factory() as db:
            await BorrowerRepository(db).get_all()

    records = [r for r in caplog.records if r.name.startswith("lending.infrastructure")]
    committed = next(r for r in records if r.msg.startswith("Committed unit of work"))
    loaded = next(r for r in records if r.msg == "Loaded %d borrowers")

    assert "%d" in committed.msg
    assert isinstance(committed.args[0], int)
    assert loaded.args == (1,)
    assert loaded.getMessage() == "Loaded 1 borrowers"
