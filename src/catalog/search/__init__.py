"""Fuzzy catalog search: matching, scoring, highlighting and ordering."""

from catalog.search.errors import InvalidConfiguration
from catalog.search.options import SEARCH_FIELDS, SearchOptions
from catalog.search.pipeline import QueryConfig, search
from catalog.search.schemas import (
    MatchSpan,
    ScoredResult,
    SearchPage,
    SearchResponse,
    SearchResultItem,
    SortMode,
    SuggestionResponse,
    TagCount,
)
from catalog.search.suggest import suggest, tag_counts

__all__ = [
    "InvalidConfiguration",
    "MatchSpan",
    "QueryConfig",
    "SEARCH_FIELDS",
    "ScoredResult",
    "SearchOptions",
    "SearchPage",
    "SearchResponse",
    "SearchResultItem",
    "SortMode",
    "SuggestionResponse",
    "TagCount",
    "search",
    "suggest",
    "tag_counts",
]
