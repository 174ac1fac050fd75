from dependency_injector import containers, providers
from sqlalchemy.ext.asyncio import AsyncSession

from lending.application.borrowers.use_cases.get_all_borrowers_use_case import (
    GetAllBorrowersQueryHandler,
)
from lending.application.borrowers.use_cases.register_borrower_use_case import (
    RegisterBorrowerCommandHandler,
)
from lending.application.catalog.use_cases.get_catalog_entry_by_isbn_use_case import (
    GetCatalogEntryByIsbnQueryHandler,
)
from lending.application.catalog.use_cases.update_catalog_entry_use_case import (
    UpdateCatalogEntryCommandHandler,
)
from lending.application.library.use_cases.borrow_book_use_case import BorrowBookCommandHandler
from lending.application.library.use_cases.get_all_books_use_case import GetAllBooksQueryHandler
from lending.application.library.use_cases.register_book_use_case import (
    RegisterBookCommandHandler,
)
from lending.application.library.use_cases.return_book_use_case import ReturnBookCommandHandler
from lending.infrastructure.borrowers.repositories import BorrowerRepository
from lending.infrastructure.catalog.repositories import CatalogEntryRepository
from lending.infrastructure.common.id_generator import UuidIdGenerator
from lending.infrastructure.common.unit_of_work import SqlAlchemyUnitOfWork
from lending.infrastructure.library.repositories import BookRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=AsyncSession)

    # Repositories and unit of work share the request-scoped session
    book_repository = providers.Factory(BookRepository, db=db)
    borrower_repository = providers.Factory(BorrowerRepository, db=db)
    catalog_entry_repository = providers.Factory(CatalogEntryRepository, db=db)
    unit_of_work = providers.Factory(SqlAlchemyUnitOfWork, db=db)

    id_generator = providers.Singleton(UuidIdGenerator)

    # Borrowers module, application handlers
    register_borrower_handler = providers.Factory(
        RegisterBorrowerCommandHandler,
        borrower_repository=borrower_repository,
        id_generator=id_generator,
        unit_of_work=unit_of_work,
    )
    get_all_borrowers_handler = providers.Factory(
        GetAllBorrowersQueryHandler,
        borrower_repository=borrower_repository,
    )

    # Library module, application handlers
    register_book_handler = providers.Factory(
        RegisterBookCommandHandler,
        book_repository=book_repository,
        catalog_entry_repository=catalog_entry_repository,
        id_generator=id_generator,
        unit_of_work=unit_of_work,
    )
    get_all_books_handler = providers.Factory(
        GetAllBooksQueryHandler,
        book_repository=book_repository,
    )
    borrow_book_handler = providers.Factory(
        BorrowBookCommandHandler,
        book_repository=book_repository,
        borrower_repository=borrower_repository,
        catalog_entry_repository=catalog_entry_repository,
        unit_of_work=unit_of_work,
    )
    return_book_handler = providers.Factory(
        ReturnBookCommandHandler,
        book_repository=book_repository,
        catalog_entry_repository=catalog_entry_repository,
        unit_of_work=unit_of_work,
    )

    # Catalog module, application handlers
    get_catalog_entry_by_isbn_handler = providers.Factory(
        GetCatalogEntryByIsbnQueryHandler,
        catalog_entry_repository=catalog_entry_repository,
    )
    update_catalog_entry_handler = providers.Factory(
        UpdateCatalogEntryCommandHandler,
        catalog_entry_repository=catalog_entry_repository,
        unit_of_work=unit_of_work,
    )


# Initialize container
container = Container()
