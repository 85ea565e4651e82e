"""Validated tuning parameters for the search core."""

import math

from catalog.search.errors import InvalidConfiguration
from catalog.search.matcher import DEFAULT_MIN_MATCH_LENGTH, DEFAULT_THRESHOLD

FIELD_TITLE = "title"
FIELD_TAGS = "tags"
FIELD_DESCRIPTION = "description"

SEARCH_FIELDS: tuple[str, ...] = (FIELD_TITLE, FIELD_TAGS, FIELD_DESCRIPTION)

DEFAULT_WEIGHTS: dict[str, float] = {
    FIELD_TITLE: 0.6,
    FIELD_TAGS: 0.25,
    FIELD_DESCRIPTION: 0.15,
}

DEFAULT_SUGGESTION_LIMIT = 8


class SearchOptions:
    """Matching threshold, field weights and suggestion limits.

    Validation happens on construction; an options object that exists is
    always usable.

    Attributes:
        threshold: Fraction of query characters allowed to differ.
        weights: Weight per searchable field, summing to 1.
        min_match_length: Minimum query length for suggestions and
            minimum highlighted run length.
        suggestion_limit: Maximum number of suggestions returned.
    """

    def __init__(
        self,
        threshold: float = DEFAULT_THRESHOLD,
        weights: dict[str, float] | None = None,
        min_match_length: int = DEFAULT_MIN_MATCH_LENGTH,
        suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT,
    ) -> None:
        """Initialize and validate search options.

        Args:
            threshold: Matching threshold in ``[0, 1]``.
            weights: Field weights keyed by field name. Defaults to
                title 0.6, tags 0.25, description 0.15.
            min_match_length: Positive minimum match length.
            suggestion_limit: Positive suggestion cap.

        Raises:
            InvalidConfiguration: If any parameter is out of range.
        """
        weights = dict(DEFAULT_WEIGHTS if weights is None else weights)

        if not 0.0 <= threshold <= 1.0:
            raise InvalidConfiguration(
                f"threshold must be within [0, 1], got {threshold}", "threshold"
            )
        if set(weights) != set(SEARCH_FIELDS):
            raise InvalidConfiguration(
                f"weights must cover exactly {', '.join(SEARCH_FIELDS)}", "weights"
            )
        if any(w < 0 for w in weights.values()):
            raise InvalidConfiguration("weights must not be negative", "weights")
        total = sum(weights.values())
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise InvalidConfiguration(
                f"weights must sum to 1, got {total}", "weights"
            )
        if min_match_length < 1:
            raise InvalidConfiguration(
                "min_match_length must be at least 1", "min_match_length"
            )
        if suggestion_limit < 1:
            raise InvalidConfiguration(
                "suggestion_limit must be at least 1", "suggestion_limit"
            )

        self.threshold = threshold
        self.weights = weights
        self.min_match_length = min_match_length
        self.suggestion_limit = suggestion_limit
