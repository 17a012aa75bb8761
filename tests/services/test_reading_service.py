"""Tests for reading service layer functionality."""
from datetime import UTC, datetime

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from models.book import Book
from models.reading import ReadingStatus
from schemas.book import BookCreate
from schemas.reading import ReadingCreate, ReadingUpdate
from services.book_service import BookNotFoundError, create_book, delete_book
from services.reading_service import (
    ReadingNotFoundError,
    create_reading,
    delete_reading,
    get_reading,
    list_readings,
    update_reading,
)


@pytest.fixture
async def test_book(db_session: AsyncSession) -> Book:
    """Create a book to read."""
    return await create_book(db_session, BookCreate(title="Dune", author="Frank Herbert"))


def _reading_data(**overrides: object) -> ReadingCreate:
    data = {
        "user_id": "reader-1",
        "start_date": datetime(2024, 1, 1, tzinfo=UTC),
    }
    data.update(overrides)
    return ReadingCreate(**data)


async def test__create_reading__defaults(db_session: AsyncSession, test_book: Book) -> None:
    reading = await create_reading(db_session, test_book.id, _reading_data())

    assert reading.id is not None
    assert reading.book_id == test_book.id
    assert reading.status == ReadingStatus.NOT_STARTED
    assert reading.current_page == 0
    assert reading.rating is None


async def test__create_reading__missing_book_raises(db_session: AsyncSession) -> None:
    with pytest.raises(BookNotFoundError):
        await create_reading(db_session, 12345, _reading_data())


async def test__list_readings__only_for_that_book(
    db_session: AsyncSession,
    test_book: Book,
) -> None:
    other_book = await create_book(db_session, BookCreate(title="Emma", author="Jane Austen"))
    await create_reading(db_session, test_book.id, _reading_data(user_id="a"))
    await create_reading(db_session, test_book.id, _reading_data(user_id="b"))
    await create_reading(db_session, other_book.id, _reading_data(user_id="c"))

    readings = await list_readings(db_session, test_book.id)

    assert [r.user_id for r in readings] == ["a", "b"]


async def test__list_readings__missing_book_raises(db_session: AsyncSession) -> None:
    with pytest.raises(BookNotFoundError):
        await list_readings(db_session, 12345)


async def test__update_reading__replaces_progress(
    db_session: AsyncSession,
    test_book: Book,
) -> None:
    reading = await create_reading(db_session, test_book.id, _reading_data())

    updated = await update_reading(
        db_session,
        reading.id,
        ReadingUpdate(
            user_id="reader-1",
            start_date=datetime(2024, 1, 1, tzinfo=UTC),
            end_date=datetime(2024, 2, 1, tzinfo=UTC),
            status=ReadingStatus.COMPLETED,
            current_page=412,
            rating=5,
            notes="Loved it",
        ),
    )

    assert updated.status == ReadingStatus.COMPLETED
    assert updated.current_page == 412
    assert updated.rating == 5
    assert updated.notes == "Loved it"
    assert updated.book_id == test_book.id


async def test__update_reading__missing_raises(db_session: AsyncSession) -> None:
    with pytest.raises(ReadingNotFoundError):
        await update_reading(db_session, 12345, ReadingUpdate(**_reading_data().model_dump()))


async def test__delete_reading__missing_is_noop(db_session: AsyncSession) -> None:
    assert await delete_reading(db_session, 12345) is False


async def test__delete_book__cascades_to_readings(
    db_session: AsyncSession,
    test_book: Book,
) -> None:
    reading = await create_reading(db_session, test_book.id, _reading_data())
    reading_id = reading.id
    db_session.expunge(reading)

    await delete_book(db_session, test_book.id)

    assert await get_reading(db_session, reading_id) is None
