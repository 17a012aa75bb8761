"""Pydantic schemas for book endpoints."""
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from schemas.validators import (
    validate_description_length,
    validate_required_text,
    validate_title_length,
)


class BookCreate(BaseModel):
    """Schema for creating a book."""

    title: str
    author: str = Field(max_length=300)
    isbn: str = Field(default="", max_length=20)
    published_date: date | None = None
    genre: str = Field(default="", max_length=100)
    description: str = ""
    page_count: int = Field(default=0, ge=0)

    @field_validator("title")
    @classmethod
    def check_title(cls, v: str) -> str:
        """Validate title is present and within length."""
        validate_required_text(v, "Title")
        return validate_title_length(v)

    @field_validator("author")
    @classmethod
    def check_author(cls, v: str) -> str:
        """Validate author is present."""
        return validate_required_text(v, "Author")

    @field_validator("isbn")
    @classmethod
    def strip_isbn(cls, v: str) -> str:
        """ISBNs are compared after trimming."""
        return v.strip()

    @field_validator("description")
    @classmethod
    def check_description_length(cls, v: str) -> str:
        """Validate description length."""
        return validate_description_length(v)


class BookUpdate(BookCreate):
    """Schema for updating a book (full replacement)."""


class BookResponse(BaseModel):
    """Schema for book responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str
    isbn: str
    published_date: date | None
    genre: str
    description: str
    page_count: int
    created_at: datetime
    updated_at: datetime
