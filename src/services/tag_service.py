"""Service layer for tag operations."""
import logging
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from db.repository import Repository
from models.bookmark import Bookmark
from models.tag import DEFAULT_TAG_COLOR, BookmarkTag, Tag

logger = logging.getLogger(__name__)


def normalize_tag_names(tag_names: Iterable[str] | None) -> list[str]:
    """
    Normalize a requested list of tag names.

    Names are trimmed; empty and whitespace-only names are dropped; repeated
    names are removed keeping the first occurrence. Case is preserved, so
    "Tag" and "tag" remain distinct.
    """
    if not tag_names:
        return []
    normalized = []
    seen: set[str] = set()
    for name in tag_names:
        trimmed = name.strip()
        if not trimmed:
            continue  # Skip empty tags silently
        if trimmed not in seen:
            seen.add(trimmed)
            normalized.append(trimmed)
    return normalized


async def list_tags(db: AsyncSession) -> list[Tag]:
    """Get every tag, in creation order."""
    return await Repository(db, Tag).get_all()


async def get_tag_by_name(db: AsyncSession, name: str) -> Tag | None:
    """
    Get a tag by its exact (trimmed) name.

    Args:
        db: Database session.
        name: Tag name. Surrounding whitespace is ignored; case is not.

    Returns:
        The Tag if found, None otherwise.
    """
    result = await db.execute(select(Tag).where(Tag.name == name.strip()))
    return result.scalar_one_or_none()


async def get_or_create_tag(
    db: AsyncSession,
    name: str,
    color: str | None = None,
) -> Tag:
    """
    Get an existing tag by name or create it.

    The insert runs in its own savepoint. If it violates the unique name
    constraint, another transaction created the tag between our lookup and our
    insert; the savepoint is rolled back and the tag is fetched instead.

    Args:
        db: Database session.
        name: Tag name (trimmed before use).
        color: Color for a newly created tag. Defaults to DEFAULT_TAG_COLOR.

    Returns:
        The existing or newly created Tag.
    """
    name = name.strip()
    existing = await get_tag_by_name(db, name)
    if existing is not None:
        return existing

    tag = Tag(name=name, color=color or DEFAULT_TAG_COLOR)
    try:
        async with db.begin_nested():
            db.add(tag)
            await db.flush()
    except IntegrityError:
        logger.warning("Tag %r created concurrently; using existing row", name)
        existing = await get_tag_by_name(db, name)
        if existing is None:
            raise
        return existing
    return tag


async def reconcile_bookmark_tags(
    db: AsyncSession,
    bookmark_id: int,
    tag_names: Iterable[str] | None,
) -> list[Tag]:
    """
    Make a bookmark's tag associations match ``tag_names`` exactly.

    Clears every existing association, then attaches one tag per normalized
    name, creating tags that don't exist yet. Tags that lose their last
    association are kept.

    The bookmark row is locked for the duration (SELECT ... FOR UPDATE, a no-op
    on SQLite where writers are already serialized) and the whole
    clear-and-rebuild runs in a savepoint, so a failure leaves the previous
    associations intact.

    Args:
        db: Database session.
        bookmark_id: ID of an existing bookmark.
        tag_names: Requested tag names, in order.

    Returns:
        The tags now attached, in request order.
    """
    names = normalize_tag_names(tag_names)
    associations = Repository(db, BookmarkTag)

    async with db.begin_nested():
        await db.execute(
            select(Bookmark.id).where(Bookmark.id == bookmark_id).with_for_update(),
        )

        existing = await associations.find(BookmarkTag.bookmark_id == bookmark_id)
        await associations.delete_many(existing)

        tags = []
        for name in names:
            tag = await get_or_create_tag(db, name)
            db.add(BookmarkTag(bookmark_id=bookmark_id, tag_id=tag.id))
            tags.append(tag)
        await db.flush()

    logger.info("Bookmark %s tagged with %s", bookmark_id, names)
    return tags
