import pytest

from lending.domain.borrowers.entities.borrower import Borrower
from lending.domain.common.exceptions import ValidationError
from lending.domain.common.value_objects import BorrowerId, EmailAddress

EMAIL = EmailAddress.create("ada@example.com")


def test_register_borrower() -> None:
    borrower = Borrower.register(BorrowerId.create("B1"), "Ada Lovelace", EMAIL)

    assert borrower.id == BorrowerId.create("B1")
    assert borrower.name == "Ada Lovelace"
    assert borrower.email_address == EMAIL


@pytest.mark.parametrize("name", ["", "   "])
def test_register_rejects_blank_name(name: str) -> None:
    with pytest.raises(ValidationError, match="Name must not be empty"):
        Borrower.register(BorrowerId.create("B1"), name, EMAIL)


def test_update_name_and_email() -> None:
    borrower = Borrower.register(BorrowerId.create("B1"), "Ada", EMAIL)
    new_email = EmailAddress.create("countess@example.com")

    borrower.update_name("Ada Lovelace").update_email_address(new_email)

    assert borrower.name == "Ada Lovelace"
    assert borrower.email_address == new_email
