"""ISBN value object."""

from dataclasses import dataclass

from ..exceptions import ValidationError
from ..value_object import ValueObject

ISBN10_LENGTH = 10
ISBN13_LENGTH = 13


def _normalize(raw: str) -> str:
    return raw.replace("-", "").replace(" ", "").upper()


def _is_valid_format(normalized: str) -> bool:
    if len(normalized) == ISBN10_LENGTH:
        # Nine digits followed by a check character that may be 'X'
        head, check = normalized[:-1], normalized[-1]
        return _is_ascii_digits(head) and (_is_ascii_digits(check) or check == "X")
    if len(normalized) == ISBN13_LENGTH:
        return _is_ascii_digits(normalized)
    return False


def _is_ascii_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()


@dataclass(frozen=True, eq=False)
class Isbn(ValueObject):
    """
    International Standard Book Number.

    Holds the normalized form: hyphens and spaces removed, uppercased.
    Only the shape is checked (10 or 13 characters), not the check digit.
    """

    value: str

    @classmethod
    def create(cls, raw: str | None) -> "Isbn":
        """
        Parse and validate an ISBN.

        Raises:
            ValidationError: If raw is blank or not a 10/13 character ISBN
        """
        if raw is None or not raw.strip():
            raise ValidationError("ISBN must not be empty", field="isbn", value=raw)

        normalized = _normalize(raw)
        if not _is_valid_format(normalized):
            raise ValidationError(
                f"ISBN must be 10 or 13 digits. Provided value '{raw}' "
                f"has {len(normalized)} characters",
                field="isbn",
                value=raw,
            )
        return cls(normalized)

    @classmethod
    def try_parse(cls, raw: str | None) -> "Isbn | None":
        """Parse an ISBN, returning None instead of raising."""
        if raw is None or not raw.strip():
            return None
        normalized = _normalize(raw)
        if not _is_valid_format(normalized):
            return None
        return cls(normalized)

    def __str__(self) -> str:
        return self.value
