from fastapi import APIRouter, Depends
from starlette import status

from lending.application.catalog.use_cases.get_catalog_entry_by_isbn_use_case import (
    GetCatalogEntryByIsbnQuery,
    GetCatalogEntryByIsbnQueryHandler,
)
from lending.application.catalog.use_cases.update_catalog_entry_use_case import (
    UpdateCatalogEntryCommand,
    UpdateCatalogEntryCommandHandler,
)
from lending.core import container
from lending.infrastructure.catalog.schemas import (
    CatalogEntryDetailsResponse,
    UpdateCatalogEntryRequest,
)
from lending.infrastructure.common.di import inject_use_case
from lending.infrastructure.common.schemas import ErrorResponse

router = APIRouter(prefix="/catalog-entries", tags=["catalog-entries"])


@router.get(
    "/{isbn}",
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)
async def get_catalog_entry(
    isbn: str,
    handler: GetCatalogEntryByIsbnQueryHandler = Depends(
        inject_use_case(container.get_catalog_entry_by_isbn_handler)
    ),
) -> CatalogEntryDetailsResponse:
    """Get a catalog entry by ISBN. Hyphenated and plain forms are equivalent."""
    result = await handler.handle(GetCatalogEntryByIsbnQuery(isbn=isbn))
    return CatalogEntryDetailsResponse.from_dto(result)


@router.put(
    "/{isbn}",
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)
async def update_catalog_entry(
    isbn: str,
    request: UpdateCatalogEntryRequest,
    handler: UpdateCatalogEntryCommandHandler = Depends(
        inject_use_case(container.update_catalog_entry_handler)
    ),
) -> CatalogEntryDetailsResponse:
    """
    Update title and author of a catalog entry.

    Every copy registered under this ISBN reflects the new metadata.
    """
    result = await handler.handle(
        UpdateCatalogEntryCommand(isbn=isbn, title=request.title, author=request.author)
    )
    return CatalogEntryDetailsResponse.from_dto(result)
