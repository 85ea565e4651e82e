"""Span merging and assembly of annotated search results."""

from collections.abc import Iterable

from catalog.records.schemas import Record
from catalog.search.schemas import MatchSpan, ScoredResult
from catalog.search.scorer import FieldMatch


def merge_spans(spans: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Merge overlapping or touching half-open ranges.

    Args:
        spans: Ranges in any order.

    Returns:
        Disjoint ranges sorted by start offset.

    Examples:
        >>> merge_spans([(4, 8), (2, 5), (10, 12)])
        [(2, 8), (10, 12)]
    """
    merged: list[tuple[int, int]] = []
    for start, end in sorted(spans):
        if merged and start <= merged[-1][1]:
            prev_start, prev_end = merged[-1]
            merged[-1] = (prev_start, max(prev_end, end))
        else:
            merged.append((start, end))
    return merged


def assemble(record: Record, score: float, matches: list[FieldMatch]) -> ScoredResult:
    """Build the scored result for a matched record.

    Spans are merged separately for each field, and for list fields
    separately for each element.

    Args:
        record: The matched record.
        score: Aggregate relevance score.
        matches: Raw field matches from the scorer.

    Returns:
        Result whose highlights map field names to merged spans.
    """
    grouped: dict[tuple[str, int | None], list[tuple[int, int]]] = {}
    for match in matches:
        grouped.setdefault((match.field, match.index), []).extend(match.spans)

    highlights: dict[str, list[MatchSpan]] = {}
    for (field, index), spans in grouped.items():
        merged = merge_spans(spans)
        if not merged:
            continue
        highlights.setdefault(field, []).extend(
            MatchSpan(field=field, index=index, start=start, end=end)
            for start, end in merged
        )

    return ScoredResult(item=record, score=score, highlights=highlights)


def passthrough(record: Record) -> ScoredResult:
    """Wrap a record as an unscored result without highlights."""
    return ScoredResult(item=record)
