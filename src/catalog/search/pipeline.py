"""Query configuration and the search entry point.

``search`` turns a record snapshot and a query into a page of results:
match and score every record, filter on the active tag, sort, then
truncate. It is pure and synchronous; identical inputs always produce
identical output.
"""

from collections.abc import Sequence

import structlog

from catalog.records.schemas import Record
from catalog.search.assembler import assemble, passthrough
from catalog.search.errors import InvalidConfiguration
from catalog.search.normalize import normalize_query
from catalog.search.options import SearchOptions
from catalog.search.schemas import ScoredResult, SearchPage, SortMode
from catalog.search.scorer import score_record

logger = structlog.get_logger()


class QueryConfig:
    """Per-request search parameters.

    Attributes:
        text: Raw query; empty means no relevance filtering.
        active_tag: Exact tag every result must carry, if set.
        sort_mode: Result ordering.
        page_size: Maximum number of results returned.
    """

    def __init__(
        self,
        text: str = "",
        active_tag: str | None = None,
        sort_mode: SortMode | str = SortMode.RELEVANCE,
        page_size: int = 10,
    ) -> None:
        """Initialize and validate a query.

        Raises:
            InvalidConfiguration: If page_size is not positive or the
                sort mode is unknown.
        """
        if page_size <= 0:
            raise InvalidConfiguration(
                f"page_size must be positive, got {page_size}", "page_size"
            )
        try:
            sort_mode = SortMode(sort_mode)
        except ValueError as e:
            raise InvalidConfiguration(
                f"unknown sort mode: {sort_mode!r}", "sort_mode"
            ) from e

        self.text = text
        self.active_tag = active_tag
        self.sort_mode = sort_mode
        self.page_size = page_size


def rank(
    records: Sequence[Record], text: str, options: SearchOptions
) -> list[ScoredResult]:
    """Match every record against the query, in collection order.

    Records that match no field are dropped. An empty or whitespace-only
    query wraps every record without a score.
    """
    pattern = normalize_query(text)
    if not pattern:
        return [passthrough(record) for record in records]

    results: list[ScoredResult] = []
    for record in records:
        scored = score_record(record, pattern, options)
        if scored is not None:
            score, matches = scored
            results.append(assemble(record, score, matches))
    return results


def filter_by_tag(results: list[ScoredResult], tag: str | None) -> list[ScoredResult]:
    """Keep results whose record carries exactly this tag (case-sensitive)."""
    if tag is None:
        return results
    return [result for result in results if tag in result.item.tags]


def sort_results(results: list[ScoredResult], mode: SortMode) -> list[ScoredResult]:
    """Order results; equal keys keep their collection order.

    Args:
        results: Results in collection order.
        mode: Relevance (ascending score), newest or oldest first.

    Returns:
        A new, stably sorted list.
    """
    if mode is SortMode.NEWEST:
        return sorted(results, key=lambda r: r.item.date, reverse=True)
    if mode is SortMode.OLDEST:
        return sorted(results, key=lambda r: r.item.date)
    if any(r.score is None for r in results):
        return list(results)
    return sorted(results, key=lambda r: r.score)


def search(
    records: Sequence[Record],
    query: QueryConfig,
    options: SearchOptions | None = None,
) -> SearchPage:
    """Run the full search pipeline over a record collection.

    Args:
        records: Records in collection order. Copied before use, so the
            caller may keep appending to its own collection.
        query: Query text, tag filter, ordering and page size.
        options: Threshold and field weights. Defaults if None.

    Returns:
        SearchPage with the pre-truncation total and the result page.
    """
    options = options or SearchOptions()
    snapshot = tuple(records)

    ranked = rank(snapshot, query.text, options)
    filtered = filter_by_tag(ranked, query.active_tag)
    ordered = sort_results(filtered, query.sort_mode)

    logger.debug(
        "search_completed",
        record_count=len(snapshot),
        matched=len(ranked),
        total=len(ordered),
        sort=query.sort_mode.value,
    )

    return SearchPage(total_count=len(ordered), page=ordered[: query.page_size])
