"""Use case for listing borrowers."""

from dataclasses import dataclass

from lending.application.borrowers.protocols.borrower_repository import (
    BorrowerRepositoryProtocol,
)
from lending.application.borrowers.use_cases.dtos import BorrowerDto
from lending.application.common import Query, QueryHandler


@dataclass(frozen=True)
class GetAllBorrowersQuery(Query):
    pass


class GetAllBorrowersQueryHandler(QueryHandler[GetAllBorrowersQuery, tuple[BorrowerDto, ...]]):
    """Lists every registered borrower."""

    def __init__(self, borrower_repository: BorrowerRepositoryProtocol) -> None:
        self.borrower_repository = borrower_repository

    async def handle(self, query: GetAllBorrowersQuery) -> tuple[BorrowerDto, ...]:
        borrowers = await self.borrower_repository.get_all()
        return tuple(BorrowerDto.from_domain(borrower) for borrower in borrowers)
