"""Email address value object.

Provides validated, normalized email addresses for borrower identification.
"""

from dataclasses import dataclass

from pydantic import validate_email
from pydantic_core import PydanticCustomError

from ..exceptions import ValidationError
from ..value_object import ValueObject


def _parse(raw: str) -> str | None:
    """Return the lowercased address, or None when raw is not a single valid address."""
    try:
        _, address = validate_email(raw.strip())
    except PydanticCustomError:
        return None
    return address.lower()


@dataclass(frozen=True, eq=False)
class EmailAddress(ValueObject):
    """Value object representing a validated, lowercased email address."""

    value: str

    @classmethod
    def create(cls, raw: str | None) -> "EmailAddress":
        """
        Parse and validate an email address.

        Raises:
            ValidationError: If raw is blank or not a valid mail address
        """
        if raw is None or not raw.strip():
            raise ValidationError("Email address must not be empty", field="email", value=raw)

        normalized = _parse(raw)
        if normalized is None:
            raise ValidationError(f"Invalid email format: '{raw}'", field="email", value=raw)
        return cls(normalized)

    @classmethod
    def try_parse(cls, raw: str | None) -> "EmailAddress | None":
        """Parse an email address, returning None instead of raising."""
        if raw is None or not raw.strip():
            return None
        normalized = _parse(raw)
        return cls(normalized) if normalized is not None else None

    def __str__(self) -> str:
        return self.value
