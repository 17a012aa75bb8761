"""Bookmark CRUD endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session
from schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from schemas.tag import TagResponse
from services import bookmark_service, tag_service
from services.bookmark_service import BookmarkNotFoundError

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


@router.get("/", response_model=list[BookmarkResponse])
async def list_bookmarks(
    db: AsyncSession = Depends(get_async_session),
) -> list[BookmarkResponse]:
    """Get all bookmarks, oldest first."""
    bookmarks = await bookmark_service.list_bookmarks(db)
    return [BookmarkResponse.model_validate(b) for b in bookmarks]


@router.get("/search", response_model=list[BookmarkResponse])
async def search_bookmarks(
    q: str = Query(default="", description="Case-sensitive substring of title, description, or url"),  # noqa: E501
    db: AsyncSession = Depends(get_async_session),
) -> list[BookmarkResponse]:
    """
    Search bookmarks by title, description, or URL.

    Returns 400 if the search term is empty.
    """
    if not q.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Search term is required")  # noqa: E501
    bookmarks = await bookmark_service.search_bookmarks(db, q)
    return [BookmarkResponse.model_validate(b) for b in bookmarks]


@router.get("/tags", response_model=list[TagResponse])
async def list_tags(
    db: AsyncSession = Depends(get_async_session),
) -> list[TagResponse]:
    """Get all available tags, including ones no bookmark uses any more."""
    tags = await tag_service.list_tags(db)
    return [TagResponse.model_validate(t) for t in tags]


@router.get("/{bookmark_id}", response_model=BookmarkResponse)
async def get_bookmark(
    bookmark_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Get a single bookmark by ID."""
    bookmark = await bookmark_service.get_bookmark(db, bookmark_id)
    if bookmark is None:
        raise HTTPException(status_code=404, detail=f"Bookmark with ID {bookmark_id} not found")
    return BookmarkResponse.model_validate(bookmark)


@router.post("/", response_model=BookmarkResponse, status_code=201)
async def create_bookmark(
    data: BookmarkCreate,
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Create a new bookmark. Unknown tag names create new tags."""
    bookmark = await bookmark_service.create_bookmark(db, data)
    return BookmarkResponse.model_validate(bookmark)


@router.put("/{bookmark_id}", response_model=BookmarkResponse)
async def update_bookmark(
    bookmark_id: int,
    data: BookmarkUpdate,
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Replace a bookmark's fields and tags."""
    try:
        bookmark = await bookmark_service.update_bookmark(db, bookmark_id, data)
    except BookmarkNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return BookmarkResponse.model_validate(bookmark)


@router.delete("/{bookmark_id}", status_code=204)
async def delete_bookmark(
    bookmark_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Delete a bookmark. Deleting a missing bookmark also returns 204."""
    await bookmark_service.delete_bookmark(db, bookmark_id)
