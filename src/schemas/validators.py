"""
Shared validation functions for Pydantic schemas.

Used across entity schemas (bookmarks, books, tags).
"""
from core.config import get_settings
from models.tag import MAX_TAG_NAME_LENGTH


def validate_required_text(value: str, field_name: str) -> str:
    """
    Ensure a required text field is not blank.

    The value is returned as given; only the emptiness check ignores whitespace.

    Raises:
        ValueError: If the value is empty or whitespace only.
    """
    if not value or not value.strip():
        raise ValueError(f"{field_name} cannot be empty")
    return value


def validate_title_length(title: str | None) -> str | None:
    """Validate that title doesn't exceed maximum length."""
    settings = get_settings()
    if title is not None and len(title) > settings.max_title_length:
        raise ValueError(
            f"Title exceeds maximum length of {settings.max_title_length:,} characters "
            f"(got {len(title):,} characters).",
        )
    return title


def validate_description_length(description: str | None) -> str | None:
    """Validate that description doesn't exceed maximum length."""
    settings = get_settings()
    if description is not None and len(description) > settings.max_description_length:
        max_len = settings.max_description_length
        raise ValueError(
            f"Description exceeds maximum length of {max_len:,} characters "
            f"(got {len(description):,} characters).",
        )
    return description


def validate_tag_name_lengths(tags: list[str]) -> list[str]:
    """
    Reject tag names that won't fit the tag name column once trimmed.

    Names are returned untouched; trimming and deduplication happen during
    reconciliation.
    """
    for tag in tags:
        trimmed = tag.strip()
        if len(trimmed) > MAX_TAG_NAME_LENGTH:
            raise ValueError(
                f"Tag name exceeds maximum length of {MAX_TAG_NAME_LENGTH} characters "
                f"(got {len(trimmed):,} characters): '{trimmed[:20]}...'",
            )
    return tags
