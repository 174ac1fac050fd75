import pytest

from lending.domain.catalog.entities.catalog_entry import CatalogEntry
from lending.domain.common.exceptions import ValidationError
from lending.domain.common.value_objects import Isbn


class TestCatalogEntry:
    def test_create_parses_raw_isbn(self) -> None:
        entry = CatalogEntry.create("978-0-13-468599-1", "Effective Java", "Joshua Bloch")

        assert entry.isbn == Isbn.create("9780134685991")
        assert entry.id == entry.isbn
        assert entry.title == "Effective Java"
        assert entry.author == "Joshua Bloch"

    def test_create_rejects_malformed_isbn(self) -> None:
        with pytest.raises(ValidationError):
            CatalogEntry.create("123", "Title", "Author")

    @pytest.mark.parametrize(("title", "author"), [("", "Author"), ("   ", "Author")])
    def test_create_rejects_blank_title(self, title: str, author: str) -> None:
        with pytest.raises(ValidationError, match="Title must not be empty"):
            CatalogEntry.create("9780134685991", title, author)

    def test_create_rejects_blank_author(self) -> None:
        with pytest.raises(ValidationError, match="Author must not be empty"):
            CatalogEntry.create("9780134685991", "Title", " ")

    def test_update_title_and_author(self) -> None:
        entry = CatalogEntry.create("9780134685991", "Effective Java", "Joshua Bloch")

        result = entry.update_title("Effective Java, 3rd Edition").update_author("J. Bloch")

        assert result is entry
        assert entry.title == "Effective Java, 3rd Edition"
        assert entry.author == "J. Bloch"

    def test_isbn_is_immutable(self) -> None:
        entry = CatalogEntry.create("9780134685991", "Effective Java", "Joshua Bloch")
        with pytest.raises(AttributeError):
            entry.isbn = Isbn.create("0804429570")

    def test_equality_is_by_isbn(self) -> None:
        first = CatalogEntry.create("9780134685991", "Effective Java", "Joshua Bloch")
        second = CatalogEntry.create("978-0-13-468599-1", "Other", "Someone")
        assert first == second
