"""Pydantic schemas for reading endpoints."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from models.reading import ReadingStatus


class ReadingCreate(BaseModel):
    """Schema for recording a reading of a book."""

    user_id: str = Field(min_length=1, max_length=100)
    start_date: datetime
    end_date: datetime | None = None
    status: ReadingStatus = ReadingStatus.NOT_STARTED
    current_page: int = Field(default=0, ge=0)
    notes: str | None = Field(default=None, max_length=2000)
    rating: int | None = Field(default=None, ge=1, le=5)

    @model_validator(mode="after")
    def check_dates(self) -> "ReadingCreate":
        """End date, when set, can't precede the start date."""
        if self.end_date is None:
            return self
        if (self.end_date.tzinfo is None) != (self.start_date.tzinfo is None):
            raise ValueError("start_date and end_date must both include a timezone or neither")
        if self.end_date < self.start_date:
            raise ValueError("end_date cannot be before start_date")
        return self


class ReadingUpdate(ReadingCreate):
    """Schema for updating a reading (full replacement, book stays the same)."""


class ReadingResponse(BaseModel):
    """Schema for reading responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    book_id: int
    user_id: str
    start_date: datetime
    end_date: datetime | None
    status: ReadingStatus
    current_page: int
    notes: str | None
    rating: int | None
    created_at: datetime
    updated_at: datetime
