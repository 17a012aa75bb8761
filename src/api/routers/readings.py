"""Reading endpoints addressed by reading ID."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session
from schemas.reading import ReadingResponse, ReadingUpdate
from services import reading_service
from services.reading_service import ReadingNotFoundError

router = APIRouter(prefix="/readings", tags=["readings"])


@router.get("/{reading_id}", response_model=ReadingResponse)
async def get_reading(
    reading_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> ReadingResponse:
    """Get a single reading by ID."""
    reading = await reading_service.get_reading(db, reading_id)
    if reading is None:
        raise HTTPException(status_code=404, detail=f"Reading with ID {reading_id} not found")
    return ReadingResponse.model_validate(reading)


@router.put("/{reading_id}", response_model=ReadingResponse)
async def update_reading(
    reading_id: int,
    data: ReadingUpdate,
    db: AsyncSession = Depends(get_async_session),
) -> ReadingResponse:
    """Replace a reading's progress, dates, notes, and rating."""
    try:
        reading = await reading_service.update_reading(db, reading_id, data)
    except ReadingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return ReadingResponse.model_validate(reading)


@router.delete("/{reading_id}", status_code=204)
async def delete_reading(
    reading_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Delete a reading. Deleting a missing reading also returns 204."""
    await reading_service.delete_reading(db, reading_id)
