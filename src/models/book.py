"""Book model for the reading tracker."""
from datetime import date

from sqlalchemy import Date, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, TimestampMixin


class Book(Base, TimestampMixin):
    """Book model - catalog entry that readings point at."""

    __tablename__ = "books"
    __table_args__ = (
        # Partial unique index: books without an ISBN don't collide with each other
        Index(
            "uq_books_isbn",
            "isbn",
            unique=True,
            postgresql_where=text("isbn <> ''"),
            sqlite_where=text("isbn <> ''"),
        ),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(String(300), nullable=False)
    isbn: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    published_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    genre: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    page_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
