"""Pydantic schemas for search results and API responses."""

from enum import Enum

from pydantic import BaseModel, Field

from catalog.records.schemas import Record


class SortMode(str, Enum):
    """Ordering applied to a result list."""

    RELEVANCE = "relevance"
    NEWEST = "newest"
    OLDEST = "oldest"


class MatchSpan(BaseModel):
    """Half-open character range ``[start, end)`` inside one field.

    Attributes:
        field: Field the range belongs to.
        index: Element position for list fields (tags), else None.
        start: First highlighted offset.
        end: Offset one past the last highlighted character.
    """

    field: str
    index: int | None = None
    start: int = Field(ge=0)
    end: int = Field(ge=0)


class ScoredResult(BaseModel):
    """One record in a result list.

    Attributes:
        item: The matched record.
        score: Relevance score (lower is better), None without a query.
        highlights: Merged match spans keyed by field name.
    """

    item: Record
    score: float | None = None
    highlights: dict[str, list[MatchSpan]] = Field(default_factory=dict)


class SearchPage(BaseModel):
    """Filtered, sorted and truncated result list.

    Attributes:
        total_count: Number of results before truncation.
        page: The first ``page_size`` results.
    """

    total_count: int
    page: list[ScoredResult]


class FieldMatches(BaseModel):
    """Highlight ranges for one field (or one tag) in wire form."""

    key: str
    index: int | None = None
    indices: list[tuple[int, int]] = Field(
        description="[start, end] pairs, end exclusive"
    )


class SearchResultItem(BaseModel):
    """Search result as returned to API clients."""

    item: Record
    score: float | None = None
    matches: list[FieldMatches] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ScoredResult) -> "SearchResultItem":
        """Group a result's spans by field and element for serialization."""
        grouped: dict[tuple[str, int | None], list[tuple[int, int]]] = {}
        for spans in result.highlights.values():
            for span in spans:
                grouped.setdefault((span.field, span.index), []).append(
                    (span.start, span.end)
                )
        return cls(
            item=result.item,
            score=result.score,
            matches=[
                FieldMatches(key=key, index=index, indices=indices)
                for (key, index), indices in grouped.items()
            ],
        )


class SearchResponse(BaseModel):
    """Search response envelope.

    Attributes:
        query: The original query string.
        tag: Active tag filter, if any.
        sort: Ordering that was applied.
        page_size: Maximum number of results returned.
        total: Number of matching results before truncation.
        results: The returned page of results.
    """

    query: str
    tag: str | None = None
    sort: SortMode
    page_size: int
    total: int
    results: list[SearchResultItem]


class SuggestionResponse(BaseModel):
    """Autocomplete suggestions for a partial query."""

    query: str
    suggestions: list[str]


class TagCount(BaseModel):
    """Number of records carrying a tag."""

    tag: str
    count: int
