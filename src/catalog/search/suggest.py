"""Autocomplete suggestions and tag facet counts."""

from collections.abc import Sequence

from catalog.records.schemas import Record
from catalog.search.matcher import DEFAULT_MIN_MATCH_LENGTH
from catalog.search.normalize import fold, normalize_query, tokenize
from catalog.search.options import DEFAULT_SUGGESTION_LIMIT
from catalog.search.schemas import TagCount


def suggest(
    records: Sequence[Record],
    text: str,
    min_length: int = DEFAULT_MIN_MATCH_LENGTH,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> list[str]:
    """Collect title words and tags containing the partial query.

    Containment is a plain case-insensitive substring test, not a fuzzy
    match. Candidates keep their original casing and are returned in the
    order first encountered: per record, title words before tags.

    Args:
        records: Records in collection order.
        text: Partial query as typed.
        min_length: Queries shorter than this (after trimming) yield nothing.
        limit: Maximum number of suggestions.

    Returns:
        Up to ``limit`` distinct tokens.
    """
    needle = normalize_query(text)
    if len(needle) < min_length:
        return []

    found: dict[str, None] = {}
    for record in records:
        for token in (*tokenize(record.title), *record.tags):
            if needle in fold(token):
                found.setdefault(token)
                if len(found) >= limit:
                    return list(found)
    return list(found)


def tag_counts(records: Sequence[Record]) -> list[TagCount]:
    """Count records per tag, in first-encountered order."""
    counts: dict[str, int] = {}
    for record in records:
        for tag in record.tags:
            counts[tag] = counts.get(tag, 0) + 1
    return [TagCount(tag=tag, count=count) for tag, count in counts.items()]
