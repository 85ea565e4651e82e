"""Pydantic schemas for catalog records."""

import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _reject_duplicate_tags(tags: list[str]) -> list[str]:
    seen: set[str] = set()
    for tag in tags:
        if tag in seen:
            raise ValueError(f"duplicate tag: {tag!r}")
        seen.add(tag)
    return tags


MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 2000
MAX_TAGS = 20


class RecordCreate(BaseModel):
    """Payload for adding a record to the catalog.

    Title, description and tag list lengths are capped.
    """

    title: str = Field(max_length=MAX_TITLE_LENGTH)
    description: str = Field(max_length=MAX_DESCRIPTION_LENGTH)
    tags: list[str] = Field(default_factory=list, max_length=MAX_TAGS)
    date: datetime.date = Field(description="ISO 8601 date (YYYY-MM-DD)")

    @field_validator("tags")
    @classmethod
    def tags_must_be_unique(cls, value: list[str]) -> list[str]:
        """Reject tag lists that repeat an entry."""
        return _reject_duplicate_tags(value)


class Record(BaseModel):
    """Stored catalog record.

    Attributes:
        id: Unique identifier, assigned by the store and never reused.
        title: Display title, the most heavily weighted search field.
        description: Free text, the least weighted search field.
        tags: Category labels used for matching and exact filtering.
        date: Calendar date used for chronological sorting.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    description: str
    tags: tuple[str, ...] = ()
    date: datetime.date = Field(description="ISO 8601 date (YYYY-MM-DD)")

    @field_validator("tags")
    @classmethod
    def tags_must_be_unique(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Reject tag tuples that repeat an entry."""
        _reject_duplicate_tags(list(value))
        return value
