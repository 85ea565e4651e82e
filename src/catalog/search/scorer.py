"""Per-field matching and weighted relevance scoring for one record."""

from catalog.records.schemas import Record
from catalog.search.matcher import find_match
from catalog.search.normalize import fold
from catalog.search.options import (
    FIELD_DESCRIPTION,
    FIELD_TAGS,
    FIELD_TITLE,
    SEARCH_FIELDS,
    SearchOptions,
)

UNMATCHED_COST = 1.0


class FieldMatch:
    """Match of the query against one field (or one tag) of a record.

    Attributes:
        field: Field name.
        cost: Normalized match cost, lower is better.
        spans: Raw half-open character ranges from the matcher.
        index: Position of the element for list fields such as tags.
    """

    def __init__(
        self,
        field: str,
        cost: float,
        spans: list[tuple[int, int]],
        index: int | None = None,
    ) -> None:
        self.field = field
        self.cost = cost
        self.spans = spans
        self.index = index


def match_fields(record: Record, pattern: str, options: SearchOptions) -> list[FieldMatch]:
    """Run the matcher over every searchable field of a record.

    Each matching tag yields its own FieldMatch so all of them can be
    highlighted; only the cheapest one counts towards the score.

    Args:
        record: Record to inspect.
        pattern: Normalized, non-empty query.
        options: Matching threshold and highlight run length.

    Returns:
        Field matches in title, tags, description order.
    """
    matches: list[FieldMatch] = []

    def _match(text: str) -> tuple[float, list[tuple[int, int]]] | None:
        found = find_match(
            pattern,
            fold(text),
            threshold=options.threshold,
            min_match_length=options.min_match_length,
        )
        return None if found is None else (found.cost, found.spans)

    title = _match(record.title)
    if title is not None:
        matches.append(FieldMatch(FIELD_TITLE, *title))

    for index, tag in enumerate(record.tags):
        found = _match(tag)
        if found is not None:
            matches.append(FieldMatch(FIELD_TAGS, *found, index=index))

    description = _match(record.description)
    if description is not None:
        matches.append(FieldMatch(FIELD_DESCRIPTION, *description))

    return matches


def field_costs(matches: list[FieldMatch]) -> dict[str, float]:
    """Best cost per field; fields without a match cost the full penalty."""
    costs = dict.fromkeys(SEARCH_FIELDS, UNMATCHED_COST)
    for match in matches:
        if match.cost < costs[match.field]:
            costs[match.field] = match.cost
    return costs


def aggregate_score(matches: list[FieldMatch], weights: dict[str, float]) -> float:
    """Weighted sum of per-field costs, clamped to ``[0, 1]``.

    Args:
        matches: Field matches of one record.
        weights: Weight per searchable field.

    Returns:
        Relevance score, 0 being ideal.
    """
    costs = field_costs(matches)
    score = sum(weights[field] * costs[field] for field in SEARCH_FIELDS)
    return min(max(score, 0.0), 1.0)


def score_record(
    record: Record, pattern: str, options: SearchOptions
) -> tuple[float, list[FieldMatch]] | None:
    """Score a record against a query.

    Returns:
        Tuple of (score, field matches), or None if no field matched.
    """
    matches = match_fields(record, pattern, options)
    if not matches:
        return None
    return aggregate_score(matches, options.weights), matches
