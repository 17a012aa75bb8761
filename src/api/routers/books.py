"""Book CRUD endpoints, plus the readings of each book."""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session
from schemas.book import BookCreate, BookResponse, BookUpdate
from schemas.reading import ReadingCreate, ReadingResponse
from services import book_service, reading_service
from services.book_service import BookNotFoundError, DuplicateIsbnError

router = APIRouter(prefix="/books", tags=["books"])


@router.get("/", response_model=list[BookResponse])
async def list_books(
    db: AsyncSession = Depends(get_async_session),
) -> list[BookResponse]:
    """Get all books."""
    books = await book_service.list_books(db)
    return [BookResponse.model_validate(b) for b in books]


@router.get("/search", response_model=list[BookResponse])
async def search_books(
    q: str = Query(default="", description="Case-sensitive substring of title, author, or genre"),  # noqa: E501
    db: AsyncSession = Depends(get_async_session),
) -> list[BookResponse]:
    """Search books by title, author, or genre. Returns 400 if the term is empty."""
    if not q.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Search term is required")  # noqa: E501
    books = await book_service.search_books(db, q)
    return [BookResponse.model_validate(b) for b in books]


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(
    book_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> BookResponse:
    """Get a single book by ID."""
    book = await book_service.get_book(db, book_id)
    if book is None:
        raise HTTPException(status_code=404, detail=f"Book with ID {book_id} not found")
    return BookResponse.model_validate(book)


@router.post("/", response_model=BookResponse, status_code=201)
async def create_book(
    data: BookCreate,
    db: AsyncSession = Depends(get_async_session),
) -> BookResponse:
    """
    Create a new book.

    Returns 409 if another book already has the same ISBN.
    """
    try:
        book = await book_service.create_book(db, data)
    except DuplicateIsbnError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return BookResponse.model_validate(book)


@router.put("/{book_id}", response_model=BookResponse)
async def update_book(
    book_id: int,
    data: BookUpdate,
    db: AsyncSession = Depends(get_async_session),
) -> BookResponse:
    """Replace a book's fields."""
    try:
        book = await book_service.update_book(db, book_id, data)
    except BookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except DuplicateIsbnError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return BookResponse.model_validate(book)


@router.delete("/{book_id}", status_code=204)
async def delete_book(
    book_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Delete a book and its readings."""
    deleted = await book_service.delete_book(db, book_id)
    if not deleted:
        raise HTTPException(status_code=404, detail=f"Book with ID {book_id} not found")


@router.get("/{book_id}/readings", response_model=list[ReadingResponse])
async def list_readings(
    book_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> list[ReadingResponse]:
    """Get all readings of a book."""
    try:
        readings = await reading_service.list_readings(db, book_id)
    except BookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return [ReadingResponse.model_validate(r) for r in readings]


@router.post("/{book_id}/readings", response_model=ReadingResponse, status_code=201)
async def create_reading(
    book_id: int,
    data: ReadingCreate,
    db: AsyncSession = Depends(get_async_session),
) -> ReadingResponse:
    """Start tracking a reading of a book."""
    try:
        reading = await reading_service.create_reading(db, book_id, data)
    except BookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return ReadingResponse.model_validate(reading)
