"""Pydantic schemas for bookmark endpoints."""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from schemas.tag import TagResponse
from schemas.validators import (
    validate_description_length,
    validate_required_text,
    validate_tag_name_lengths,
    validate_title_length,
)


class BookmarkCreate(BaseModel):
    """
    Schema for creating a bookmark.

    The url is stored exactly as given; it is not parsed or normalized.
    Tag names are passed through untouched and normalized during reconciliation.
    """

    title: str
    url: str
    description: str = ""
    tags: list[str] = []

    @field_validator("title")
    @classmethod
    def check_title(cls, v: str) -> str:
        """Validate title is present and within length."""
        validate_required_text(v, "Title")
        return validate_title_length(v)

    @field_validator("url")
    @classmethod
    def check_url(cls, v: str) -> str:
        """Validate url is present."""
        return validate_required_text(v, "URL")

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, v: str | None) -> str:
        """Treat a null description as empty."""
        if v is None:
            return ""
        return v

    @field_validator("description")
    @classmethod
    def check_description_length(cls, v: str) -> str:
        """Validate description length."""
        return validate_description_length(v)

    @field_validator("tags", mode="before")
    @classmethod
    def default_tags(cls, v: list[str] | None) -> list[str]:
        """Treat a null tag list as empty."""
        if v is None:
            return []
        return v

    @field_validator("tags")
    @classmethod
    def check_tag_lengths(cls, v: list[str]) -> list[str]:
        """Validate each tag name fits the tag column."""
        return validate_tag_name_lengths(v)


class BookmarkUpdate(BookmarkCreate):
    """
    Schema for updating a bookmark.

    Updates are full replacements: every field, including the tag list, must
    be supplied. Tags missing from the new list are detached.
    """


class BookmarkResponse(BaseModel):
    """
    Schema for bookmark responses.

    Uses model_validator to pick up the ``tags`` list hydrated by the bookmark
    service; an unhydrated model yields an empty list.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    url: str
    description: str
    created_at: datetime
    updated_at: datetime
    tags: list[TagResponse]

    @model_validator(mode="before")
    @classmethod
    def extract_tags(cls, data: Any) -> Any:  # noqa: ANN401
        """Extract hydrated tags from SQLAlchemy model objects."""
        if hasattr(data, "__dict__") and not isinstance(data, dict):
            return {
                "id": data.id,
                "title": data.title,
                "url": data.url,
                "description": data.description,
                "created_at": data.created_at,
                "updated_at": data.updated_at,
                "tags": data.__dict__.get("tags", []),
            }
        return data
