"""Service layer for reading CRUD operations."""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from db.repository import Repository
from models.base import utc_now
from models.book import Book
from models.reading import Reading
from schemas.reading import ReadingCreate, ReadingUpdate
from services.book_service import BookNotFoundError

logger = logging.getLogger(__name__)


class ReadingNotFoundError(Exception):
    """Raised when a reading is not found."""

    def __init__(self, reading_id: int) -> None:
        self.reading_id = reading_id
        super().__init__(f"Reading with ID {reading_id} not found")


async def list_readings(db: AsyncSession, book_id: int) -> list[Reading]:
    """
    Get all readings of a book, oldest first.

    Raises:
        BookNotFoundError: If the book does not exist.
    """
    if await Repository(db, Book).get_by_id(book_id) is None:
        raise BookNotFoundError(book_id)
    return await Repository(db, Reading).find(Reading.book_id == book_id)


async def get_reading(db: AsyncSession, reading_id: int) -> Reading | None:
    """Get a reading by ID, or None."""
    return await Repository(db, Reading).get_by_id(reading_id)


async def create_reading(db: AsyncSession, book_id: int, data: ReadingCreate) -> Reading:
    """
    Record a reading of a book.

    Raises:
        BookNotFoundError: If the book does not exist.
    """
    logger.info("Creating reading of book %s for user %s", book_id, data.user_id)
    if await Repository(db, Book).get_by_id(book_id) is None:
        raise BookNotFoundError(book_id)
    now = utc_now()
    return await Repository(db, Reading).add(
        Reading(book_id=book_id, **data.model_dump(), created_at=now, updated_at=now),
    )


async def update_reading(db: AsyncSession, reading_id: int, data: ReadingUpdate) -> Reading:
    """
    Replace a reading's fields. The book it belongs to can't change.

    Raises:
        ReadingNotFoundError: If the reading does not exist.
    """
    logger.info("Updating reading with ID: %s", reading_id)
    repo = Repository(db, Reading)
    reading = await repo.get_by_id(reading_id)
    if reading is None:
        raise ReadingNotFoundError(reading_id)
    for field, value in data.model_dump().items():
        setattr(reading, field, value)
    reading.updated_at = utc_now()
    return await repo.update(reading)


async def delete_reading(db: AsyncSession, reading_id: int) -> bool:
    """
    Delete a reading. Missing readings are a no-op.

    Returns:
        True if deleted, False if not found.
    """
    logger.info("Deleting reading with ID: %s", reading_id)
    repo = Repository(db, Reading)
    reading = await repo.get_by_id(reading_id)
    if reading is None:
        return False
    await repo.delete(reading)
    return True
