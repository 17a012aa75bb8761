"""Bookmark model for storing saved links."""
from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, TimestampMixin


class Bookmark(Base, TimestampMixin):
    """
    Bookmark model - stores URLs with a title and description.

    Tags are attached through BookmarkTag rows, which the database deletes
    together with the bookmark. The bookmark service hydrates a plain ``tags``
    attribute (list of Tag) on instances it returns.
    """

    __tablename__ = "bookmarks"
    __table_args__ = {"sqlite_autoincrement": True}  # ids are never reused

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
