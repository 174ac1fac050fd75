"""Create catalog_entries, borrowers and books tables.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create the lending schema."""
    op.create_table(
        "catalog_entries",
        sa.Column("isbn", sa.String(13), nullable=False),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("author", sa.String(500), nullable=False),
        sa.PrimaryKeyConstraint("isbn"),
    )

    op.create_table(
        "borrowers",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_borrowers_email"), "borrowers", ["email"], unique=True)

    op.create_table(
        "books",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("isbn", sa.String(13), nullable=False),
        sa.Column("borrowed_by", sa.String(64), nullable=True),
        sa.Column("borrowed_on", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["isbn"], ["catalog_entries.isbn"]),
        sa.ForeignKeyConstraint(["borrowed_by"], ["borrowers.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_books_isbn"), "books", ["isbn"], unique=False)
    op.create_index(op.f("ix_books_borrowed_by"), "books", ["borrowed_by"], unique=False)


def downgrade() -> None:
    """Drop the lending schema."""
    op.drop_index(op.f("ix_books_borrowed_by"), table_name="books")
    op.drop_index(op.f("ix_books_isbn"), table_name="books")
    op.drop_table("books")
    op.drop_index(op.f("ix_borrowers_email"), table_name="borrowers")
    op.drop_table("borrowers")
    op.drop_table("catalog_entries")
