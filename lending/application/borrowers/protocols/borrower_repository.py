from collections.abc import Sequence
from typing import Protocol

from lending.domain.borrowers.entities.borrower import Borrower
from lending.domain.common.value_objects import BorrowerId, EmailAddress


class BorrowerRepositoryProtocol(Protocol):
    async def get_by_id(self, borrower_id: BorrowerId) -> Borrower | None: ...

    async def get_all(self) -> Sequence[Borrower]: ...

    async def exists_by_id(self, borrower_id: BorrowerId) -> bool: ...

    async def exists_by_email(self, email_address: EmailAddress) -> bool: ...

    def add(self, borrower: Borrower) -> None: ...
