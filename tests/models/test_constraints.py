"""Tests for database-level constraints on the models."""
import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from models import Book, Bookmark, BookmarkTag, Tag


async def test_tag_names_are_unique(db_session: AsyncSession) -> None:
    db_session.add(Tag(name="python"))
    await db_session.flush()

    with pytest.raises(IntegrityError):
        async with db_session.begin_nested():
            db_session.add(Tag(name="python"))
            await db_session.flush()


async def test_tag_names_differing_in_case_coexist(db_session: AsyncSession) -> None:
    db_session.add_all([Tag(name="Python"), Tag(name="python")])
    await db_session.flush()

    count = (await db_session.execute(select(func.count()).select_from(Tag))).scalar_one()
    assert count == 2


async def test_association_requires_existing_bookmark(db_session: AsyncSession) -> None:
    tag = Tag(name="orphan")
    db_session.add(tag)
    await db_session.flush()

    with pytest.raises(IntegrityError):
        async with db_session.begin_nested():
            db_session.add(BookmarkTag(bookmark_id=99999, tag_id=tag.id))
            await db_session.flush()


async def test_deleting_tag_removes_its_associations(db_session: AsyncSession) -> None:
    bookmark = Bookmark(title="Site", url="https://example.com", description="")
    tag = Tag(name="temp")
    db_session.add_all([bookmark, tag])
    await db_session.flush()
    db_session.add(BookmarkTag(bookmark_id=bookmark.id, tag_id=tag.id))
    await db_session.flush()

    await db_session.delete(tag)
    await db_session.flush()

    count = (await db_session.execute(
        select(func.count()).select_from(BookmarkTag).where(
            BookmarkTag.bookmark_id == bookmark.id,
        ),
    )).scalar_one()
    assert count == 0


async def test_isbn_unique_only_when_present(db_session: AsyncSession) -> None:
    db_session.add_all([
        Book(title="A", author="X", isbn=""),
        Book(title="B", author="Y", isbn=""),
        Book(title="C", author="Z", isbn="123"),
    ])
    await db_session.flush()

    with pytest.raises(IntegrityError):
        async with db_session.begin_nested():
            db_session.add(Book(title="D", author="W", isbn="123"))
            await db_session.flush()
