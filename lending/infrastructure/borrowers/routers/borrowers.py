from fastapi import APIRouter, Depends
from starlette import status

from lending.application.borrowers.use_cases.get_all_borrowers_use_case import (
    GetAllBorrowersQuery,
    GetAllBorrowersQueryHandler,
)
from lending.application.borrowers.use_cases.register_borrower_use_case import (
    RegisterBorrowerCommand,
    RegisterBorrowerCommandHandler,
)
from lending.core import container
from lending.infrastructure.borrowers.schemas import BorrowerResponse, RegisterBorrowerRequest
from lending.infrastructure.common.di import inject_use_case
from lending.infrastructure.common.schemas import ErrorResponse

router = APIRouter(prefix="/borrowers", tags=["borrowers"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
)
async def register_borrower(
    request: RegisterBorrowerRequest,
    handler: RegisterBorrowerCommandHandler = Depends(
        inject_use_case(container.register_borrower_handler)
    ),
) -> BorrowerResponse:
    """
    Register a new borrower.

    Returns:
        The registered borrower with its generated id and normalized email

    Raises:
        ValidationError: Blank name or malformed email (400)
        EmailAlreadyRegisteredError: Email already in use (409)
    """
    result = await handler.handle(RegisterBorrowerCommand(name=request.name, email=request.email))
    return BorrowerResponse.from_dto(result)


@router.get("", status_code=status.HTTP_200_OK)
async def get_all_borrowers(
    handler: GetAllBorrowersQueryHandler = Depends(
        inject_use_case(container.get_all_borrowers_handler)
    ),
) -> list[BorrowerResponse]:
    """Get all registered borrowers ordered by name."""
    result = await handler.handle(GetAllBorrowersQuery())
    return [BorrowerResponse.from_dto(dto) for dto in result]
