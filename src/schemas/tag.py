"""Pydantic schemas for tag endpoints."""
from pydantic import BaseModel, ConfigDict


class TagResponse(BaseModel):
    """Schema for a tag as returned in listings and on bookmarks."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    color: str
