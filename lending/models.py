"""Database models."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from lending.database import Base


class CatalogEntry(Base):
    """Bibliographic metadata shared by every copy with the same ISBN."""

    __tablename__ = "catalog_entries"

    isbn: Mapped[str] = mapped_column(String(13), primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    author: Mapped[str] = mapped_column(String(500), nullable=False)

    def __repr__(self) -> str:
        return f"<CatalogEntry(isbn='{self.isbn}', title='{self.title}')>"


class Borrower(Base):
    """Registered library member."""

    __tablename__ = "borrowers"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), unique=True, index=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Borrower(id='{self.id}', name='{self.name}')>"


class Book(Base):
    """One physical copy of a catalog entry."""

    __tablename__ = "books"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    isbn: Mapped[str] = mapped_column(
        ForeignKey("catalog_entries.isbn"), index=True, nullable=False
    )
    borrowed_by: Mapped[str | None] = mapped_column(
        ForeignKey("borrowers.id"), index=True, nullable=True
    )
    borrowed_on: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<Book(id='{self.id}', isbn='{self.isbn}', borrowed_by={self.borrowed_by!r})>"
