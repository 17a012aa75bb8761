"""Service layer for book CRUD operations."""
import logging

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from db.repository import Repository
from models.base import utc_now
from models.book import Book
from schemas.book import BookCreate, BookUpdate
from services.utils import contains_case_sensitive, validate_search_term

logger = logging.getLogger(__name__)


class BookNotFoundError(Exception):
    """Raised when a book is not found."""

    def __init__(self, book_id: int) -> None:
        self.book_id = book_id
        super().__init__(f"Book with ID {book_id} not found")


class DuplicateIsbnError(Exception):
    """Raised when another book already uses the same ISBN."""

    def __init__(self, isbn: str) -> None:
        self.isbn = isbn
        super().__init__(f"A book with ISBN '{isbn}' already exists")


async def _check_isbn_taken(
    db: AsyncSession,
    isbn: str,
    exclude_id: int | None = None,
) -> bool:
    """Check whether a non-empty ISBN is used by a book other than ``exclude_id``."""
    if not isbn:
        return False
    matches = await Repository(db, Book).find(Book.isbn == isbn)
    return any(book.id != exclude_id for book in matches)


async def _flush_checking_isbn(db: AsyncSession, isbn: str) -> None:
    """Flush, translating an ISBN unique-index violation into DuplicateIsbnError."""
    try:
        await db.flush()
    except IntegrityError as e:
        await db.rollback()
        # Fallback for race condition: partial unique index constraint
        if "uq_books_isbn" in str(e) or "books.isbn" in str(e):
            raise DuplicateIsbnError(isbn) from e
        raise


async def list_books(db: AsyncSession) -> list[Book]:
    """Get all books in insertion order."""
    logger.info("Retrieving all books")
    return await Repository(db, Book).get_all()


async def get_book(db: AsyncSession, book_id: int) -> Book | None:
    """Get a book by ID, or None."""
    logger.info("Retrieving book with ID: %s", book_id)
    return await Repository(db, Book).get_by_id(book_id)


async def create_book(db: AsyncSession, data: BookCreate) -> Book:
    """
    Create a book.

    Raises:
        DuplicateIsbnError: If the (non-empty) ISBN is already used.
    """
    logger.info("Creating new book: %s", data.title)
    if await _check_isbn_taken(db, data.isbn):
        raise DuplicateIsbnError(data.isbn)

    now = utc_now()
    book = Book(**data.model_dump(), created_at=now, updated_at=now)
    db.add(book)
    await _flush_checking_isbn(db, data.isbn)
    await db.refresh(book)
    return book


async def update_book(db: AsyncSession, book_id: int, data: BookUpdate) -> Book:
    """
    Replace a book's fields.

    Raises:
        BookNotFoundError: If the book does not exist.
        DuplicateIsbnError: If the new ISBN belongs to another book.
    """
    logger.info("Updating book with ID: %s", book_id)
    book = await get_book(db, book_id)
    if book is None:
        raise BookNotFoundError(book_id)
    if await _check_isbn_taken(db, data.isbn, exclude_id=book_id):
        raise DuplicateIsbnError(data.isbn)

    for field, value in data.model_dump().items():
        setattr(book, field, value)
    book.updated_at = utc_now()
    await _flush_checking_isbn(db, data.isbn)
    await db.refresh(book)
    return book


async def delete_book(db: AsyncSession, book_id: int) -> bool:
    """
    Delete a book and, by cascade, its readings.

    Returns:
        True if deleted, False if not found.
    """
    logger.info("Deleting book with ID: %s", book_id)
    repo = Repository(db, Book)
    book = await repo.get_by_id(book_id)
    if book is None:
        return False
    await repo.delete(book)
    return True


async def search_books(db: AsyncSession, term: str) -> list[Book]:
    """
    Find books whose title, author, or genre contains ``term`` (case-sensitive).

    Raises:
        ValueError: If the term is empty or whitespace only.
    """
    term = validate_search_term(term)
    logger.info("Searching books with term: %s", term)
    return await Repository(db, Book).find(
        or_(
            contains_case_sensitive(db, Book.title, term),
            contains_case_sensitive(db, Book.author, term),
            contains_case_sensitive(db, Book.genre, term),
        ),
    )
