"""SQLAlchemy models."""
from models.base import Base, TimestampMixin
from models.tag import DEFAULT_TAG_COLOR, MAX_TAG_NAME_LENGTH, BookmarkTag, Tag
from models.bookmark import Bookmark
from models.book import Book
from models.reading import Reading, ReadingStatus

__all__ = [
    "DEFAULT_TAG_COLOR",
    "MAX_TAG_NAME_LENGTH",
    "Base",
    "Book",
    "Bookmark",
    "BookmarkTag",
    "Reading",
    "ReadingStatus",
    "Tag",
    "TimestampMixin",
]
