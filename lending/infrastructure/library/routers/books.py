from fastapi import APIRouter, Depends
from starlette import status

from lending.application.library.use_cases.borrow_book_use_case import (
    BorrowBookCommand,
    BorrowBookCommandHandler,
)
from lending.application.library.use_cases.get_all_books_use_case import (
    GetAllBooksQuery,
    GetAllBooksQueryHandler,
)
from lending.application.library.use_cases.register_book_use_case import (
    RegisterBookCommand,
    RegisterBookCommandHandler,
)
from lending.application.library.use_cases.return_book_use_case import (
    ReturnBookCommand,
    ReturnBookCommandHandler,
)
from lending.core import container
from lending.infrastructure.common.di import inject_use_case
from lending.infrastructure.common.schemas import ErrorResponse
from lending.infrastructure.library.schemas import (
    BookResponse,
    BorrowBookRequest,
    RegisterBookRequest,
    ReturnBookRequest,
)

router = APIRouter(prefix="/books", tags=["books"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
)
async def register_book(
    request: RegisterBookRequest,
    handler: RegisterBookCommandHandler = Depends(inject_use_case(container.register_book_handler)),
) -> BookResponse:
    """
    Register a new physical copy.

    The catalog entry for the ISBN is created on first registration. Later
    copies must carry the same title and author (case-insensitive).

    Raises:
        ValidationError: Malformed ISBN or blank title/author (400)
        CatalogEntryMetadataConflictError: ISBN known with other metadata (409)
    """
    result = await handler.handle(
        RegisterBookCommand(isbn=request.isbn, title=request.title, author=request.author)
    )
    return BookResponse.from_dto(result)


@router.get("", status_code=status.HTTP_200_OK)
async def get_all_books(
    handler: GetAllBooksQueryHandler = Depends(inject_use_case(container.get_all_books_handler)),
) -> list[BookResponse]:
    """Get all copies, ordered by ISBN with available copies first."""
    result = await handler.handle(GetAllBooksQuery())
    return [BookResponse.from_dto(dto) for dto in result]


@router.post(
    "/{book_id}/borrow",
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
)
async def borrow_book(
    book_id: str,
    request: BorrowBookRequest,
    handler: BorrowBookCommandHandler = Depends(inject_use_case(container.borrow_book_handler)),
) -> BookResponse:
    """Lend a copy to a borrower."""
    command = BorrowBookCommand(book_id=book_id, borrower_id=request.borrower_id)
    result = await handler.handle(command)
    return BookResponse.from_dto(result)


@router.post(
    "/{book_id}/return",
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
)
async def return_book(
    book_id: str,
    request: ReturnBookRequest,
    handler: ReturnBookCommandHandler = Depends(inject_use_case(container.return_book_handler)),
) -> BookResponse:
    """Take a copy back from the borrower holding it."""
    command = ReturnBookCommand(book_id=book_id, borrower_id=request.borrower_id)
    result = await handler.handle(command)
    return BookResponse.from_dto(result)
