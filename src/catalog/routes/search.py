"""Catalog search, suggestion and tag facet endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from fastapi import APIRouter, HTTPException, Query, Request, status

from catalog.search import (
    InvalidConfiguration,
    QueryConfig,
    SearchResponse,
    SearchResultItem,
    SortMode,
    SuggestionResponse,
    TagCount,
    search,
    suggest,
    tag_counts,
)

if TYPE_CHECKING:
    from catalog.config import Settings
    from catalog.records import RecordStore
    from catalog.search import SearchOptions

logger = structlog.get_logger()

router = APIRouter(tags=["search"])


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Fuzzy search across titles, tags and descriptions",
    description=(
        "Typo-tolerant search with weighted field scoring, highlight ranges, "
        "exact tag filtering, sorting and page truncation."
    ),
    responses={400: {"description": "Invalid search configuration"}},
)
async def search_catalog(
    request: Request,
    q: str = Query(default="", max_length=200, description="Search query string"),
    tag: str | None = Query(
        default=None, min_length=1, description="Only records carrying this exact tag"
    ),
    sort: SortMode = Query(default=SortMode.RELEVANCE, description="Result ordering"),
    page_size: int | None = Query(default=None, description="Results per page"),
) -> SearchResponse:
    """Search the catalog.

    Args:
        request: FastAPI request (provides access to app state).
        q: Query text; empty returns every record unscored.
        tag: Case-sensitive tag filter.
        sort: relevance, newest or oldest.
        page_size: Maximum number of results, defaults from settings.

    Returns:
        Result page with the total number of matches.

    Raises:
        HTTPException: 400 if the page size is out of range.
    """
    settings: Settings = request.app.state.settings
    store: RecordStore = request.app.state.record_store
    options: SearchOptions = request.app.state.search_options

    size = settings.default_page_size if page_size is None else page_size
    if size > settings.max_page_size:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"page_size must not exceed {settings.max_page_size}",
        )

    try:
        query = QueryConfig(text=q, active_tag=tag, sort_mode=sort, page_size=size)
    except InvalidConfiguration as e:
        logger.warning("search_rejected", field=e.field, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
        ) from e

    page = search(store.list_records(), query, options)

    return SearchResponse(
        query=q,
        tag=tag,
        sort=sort,
        page_size=size,
        total=page.total_count,
        results=[SearchResultItem.from_result(result) for result in page.page],
    )


@router.get(
    "/search/suggestions",
    response_model=SuggestionResponse,
    summary="Autocomplete suggestions from title words and tags",
)
async def search_suggestions(
    request: Request,
    q: str = Query(default="", max_length=200, description="Partial query"),
) -> SuggestionResponse:
    """Suggest title words and tags containing the partial query.

    Returns:
        Suggestions in first-seen order; empty for queries under the
        minimum length.
    """
    store: RecordStore = request.app.state.record_store
    options: SearchOptions = request.app.state.search_options

    suggestions = suggest(
        store.list_records(),
        q,
        min_length=options.min_match_length,
        limit=options.suggestion_limit,
    )
    return SuggestionResponse(query=q, suggestions=suggestions)


@router.get(
    "/tags",
    response_model=list[TagCount],
    summary="Tag facets with record counts",
)
async def list_tags(request: Request) -> list[TagCount]:
    """List every tag with the number of records carrying it.

    Returns:
        Tag counts in first-seen order.
    """
    store: RecordStore = request.app.state.record_store
    return tag_counts(store.list_records())
