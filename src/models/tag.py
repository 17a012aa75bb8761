"""Tag model and the bookmark-tag association."""
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, utc_now

DEFAULT_TAG_COLOR = "#007bff"
MAX_TAG_NAME_LENGTH = 100


class Tag(Base):
    """Tag model - a named, colored label shared across bookmarks."""

    __tablename__ = "tags"
    __table_args__ = (
        UniqueConstraint("name", name="uq_tags_name"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(MAX_TAG_NAME_LENGTH), nullable=False)
    color: Mapped[str] = mapped_column(
        String(20), nullable=False, default=DEFAULT_TAG_COLOR,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )


class BookmarkTag(Base):
    """
    Join row between a bookmark and a tag.

    The (bookmark_id, tag_id) pair is the primary key, so a bookmark can carry a
    given tag at most once. Both foreign keys cascade on delete.
    """

    __tablename__ = "bookmark_tags"
    __table_args__ = (
        # Index for lookups by tag (composite PK already indexes bookmark_id first)
        Index("ix_bookmark_tags_tag_id", "tag_id"),
    )

    bookmark_id: Mapped[int] = mapped_column(
        ForeignKey("bookmarks.id", ondelete="CASCADE"),
        primary_key=True,
    )
    tag_id: Mapped[int] = mapped_column(
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    )
