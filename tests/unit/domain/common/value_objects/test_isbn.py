"""Tests for Isbn value object."""

import pytest

from lending.domain.common.exceptions import ValidationError
from lending.domain.common.value_objects import Isbn


class TestIsbn:
    """Test suite for Isbn value object."""

    def test_create_isbn13_strips_hyphens(self) -> None:
        isbn = Isbn.create("978-0-13-468599-1")
        assert isbn.value == "9780134685991"

    def test_create_isbn10_with_lowercase_x(self) -> None:
        isbn = Isbn.create("0-8044-2957-x")
        assert isbn.value == "080442957X"

    def test_create_strips_spaces(self) -> None:
        assert Isbn.create(" 978 0 13 468599 1 ").value == "9780134685991"

    def test_hyphenated_and_plain_forms_are_equal(self) -> None:
        assert Isbn.create("978-0-13-468599-1") == Isbn.create("9780134685991")
        assert hash(Isbn.create("978-0-13-468599-1")) == hash(Isbn.create("9780134685991"))

    def test_str_returns_normalized_value(self) -> None:
        assert str(Isbn.create("0-8044-2957-X")) == "080442957X"

    def test_check_digit_is_not_validated(self) -> None:
        assert Isbn.create("9780134685990").value == "9780134685990"

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_create_rejects_blank(self, raw: str | None) -> None:
        with pytest.raises(ValidationError, match="must not be empty"):
            Isbn.create(raw)

    def test_create_reports_length(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Isbn.create("12345")
        assert "10 or 13 digits" in exc_info.value.message
        assert "has 5 characters" in exc_info.value.message

    @pytest.mark.parametrize(
        "raw",
        [
            "97801346859X1",  # X only allowed as ISBN-10 check character
            "978013468599X",
            "X804429570",
            "080442957Y",
            "٠٨٠٤٤٢٩٥٧٠",  # non-ASCII digits
        ],
    )
    def test_create_rejects_invalid_characters(self, raw: str) -> None:
        with pytest.raises(ValidationError):
            Isbn.create(raw)

    def test_is_frozen(self) -> None:
        isbn = Isbn.create("9780134685991")
        with pytest.raises(AttributeError):
            isbn.value = "0804429570"  # type: ignore[misc]

    def test_try_parse(self) -> None:
        assert Isbn.try_parse("978-0-13-468599-1") == Isbn.create("9780134685991")
        assert Isbn.try_parse("not-an-isbn") is None
        assert Isbn.try_parse("") is None
        assert Isbn.try_parse(None) is None
