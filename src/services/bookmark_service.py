"""Service layer for bookmark CRUD operations."""
import logging

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession

from db.repository import Repository
from models.base import utc_now
from models.bookmark import Bookmark
from models.tag import BookmarkTag, Tag
from schemas.bookmark import BookmarkCreate, BookmarkUpdate
from services.tag_service import reconcile_bookmark_tags
from services.utils import contains_case_sensitive, validate_search_term

logger = logging.getLogger(__name__)


class BookmarkNotFoundError(Exception):
    """Raised when updating a bookmark that does not exist."""

    def __init__(self, bookmark_id: int) -> None:
        self.bookmark_id = bookmark_id
        super().__init__(f"Bookmark with ID {bookmark_id} not found")


async def _hydrate(db: AsyncSession, bookmark: Bookmark) -> Bookmark:
    """
    Populate ``bookmark.tags`` from its association rows.

    An association whose tag can't be resolved is skipped rather than failing
    the whole read.
    """
    associations = await Repository(db, BookmarkTag).find(
        BookmarkTag.bookmark_id == bookmark.id,
    )
    tag_repo = Repository(db, Tag)
    tags = []
    for association in associations:
        tag = await tag_repo.get_by_id(association.tag_id)
        if tag is None:
            logger.warning(
                "Skipping dangling tag association: bookmark_id=%s tag_id=%s",
                bookmark.id,
                association.tag_id,
            )
            continue
        tags.append(tag)
    bookmark.tags = tags
    return bookmark


async def list_bookmarks(db: AsyncSession) -> list[Bookmark]:
    """Get all bookmarks in insertion order, each with its tags."""
    logger.info("Retrieving all bookmarks")
    bookmarks = await Repository(db, Bookmark).get_all()
    return [await _hydrate(db, bookmark) for bookmark in bookmarks]


async def get_bookmark(db: AsyncSession, bookmark_id: int) -> Bookmark | None:
    """
    Get a bookmark by ID.

    Returns:
        The hydrated bookmark, or None if no bookmark has this ID.
    """
    logger.info("Retrieving bookmark with ID: %s", bookmark_id)
    bookmark = await Repository(db, Bookmark).get_by_id(bookmark_id)
    if bookmark is None:
        return None
    return await _hydrate(db, bookmark)


async def create_bookmark(db: AsyncSession, data: BookmarkCreate) -> Bookmark:
    """
    Create a new bookmark and attach its tags.

    Tags named in ``data.tags`` that don't exist yet are created with the
    default color.

    Args:
        db: Database session.
        data: Bookmark creation data (title and url already validated).

    Returns:
        The created bookmark with tags hydrated. created_at == updated_at.

    Note:
        Does not commit. Caller (session generator) handles commit at request end.
    """
    logger.info("Creating new bookmark: %s", data.title)
    now = utc_now()
    bookmark = await Repository(db, Bookmark).add(
        Bookmark(
            title=data.title,
            url=data.url,
            description=data.description,
            created_at=now,
            updated_at=now,
        ),
    )
    await reconcile_bookmark_tags(db, bookmark.id, data.tags)
    return await _hydrate(db, bookmark)


async def update_bookmark(
    db: AsyncSession,
    bookmark_id: int,
    data: BookmarkUpdate,
) -> Bookmark:
    """
    Replace a bookmark's fields and tag set.

    created_at is left untouched; updated_at is set to now. Tags missing from
    ``data.tags`` are detached but not deleted.

    Raises:
        BookmarkNotFoundError: If no bookmark has this ID. Nothing is changed.
    """
    logger.info("Updating bookmark with ID: %s", bookmark_id)
    repo = Repository(db, Bookmark)
    bookmark = await repo.get_by_id(bookmark_id)
    if bookmark is None:
        raise BookmarkNotFoundError(bookmark_id)

    bookmark.title = data.title
    bookmark.url = data.url
    bookmark.description = data.description
    bookmark.updated_at = utc_now()
    await repo.update(bookmark)

    await reconcile_bookmark_tags(db, bookmark.id, data.tags)
    return await _hydrate(db, bookmark)


async def delete_bookmark(db: AsyncSession, bookmark_id: int) -> bool:
    """
    Delete a bookmark. Its tag associations are removed by cascade; tags stay.

    Deleting a missing bookmark is a no-op.

    Returns:
        True if a bookmark was deleted, False if none existed.
    """
    logger.info("Deleting bookmark with ID: %s", bookmark_id)
    repo = Repository(db, Bookmark)
    bookmark = await repo.get_by_id(bookmark_id)
    if bookmark is None:
        return False
    await repo.delete(bookmark)
    return True


async def search_bookmarks(db: AsyncSession, term: str) -> list[Bookmark]:
    """
    Find bookmarks whose title, description, or url contains ``term``.

    Matching is a case-sensitive substring match.

    Raises:
        ValueError: If the term is empty or whitespace only.
    """
    term = validate_search_term(term)
    logger.info("Searching bookmarks with term: %s", term)
    bookmarks = await Repository(db, Bookmark).find(
        or_(
            contains_case_sensitive(db, Bookmark.title, term),
            contains_case_sensitive(db, Bookmark.description, term),
            contains_case_sensitive(db, Bookmark.url, term),
        ),
    )
    return [await _hydrate(db, bookmark) for bookmark in bookmarks]
