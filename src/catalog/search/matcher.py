"""Approximate substring matching with a bounded edit distance.

The pattern has to be consumed completely, but its alignment may start
and end anywhere in the text (Sellers' variant of the Levenshtein
dynamic program). Insertions, deletions, substitutions and adjacent
transpositions each count as one edit.

A pattern of length ``m`` is accepted when ``distance / m`` does not
exceed the threshold. The match cost is that same ratio, so an exact
substring costs 0 no matter where it sits in the text.
"""

DEFAULT_THRESHOLD = 0.36
DEFAULT_MIN_MATCH_LENGTH = 2


class Match:
    """Outcome of matching one pattern against one text.

    Attributes:
        cost: Edit distance divided by pattern length (0 is exact).
        distance: Number of edits of the best alignment.
        position: Start offset of the earliest best alignment.
        spans: Sorted, non-overlapping half-open ``(start, end)`` ranges
            of text characters that took part in the match.
    """

    def __init__(
        self,
        cost: float,
        distance: int,
        position: int,
        spans: list[tuple[int, int]],
    ) -> None:
        """Initialize match result.

        Args:
            cost: Normalized edit cost in ``[0, 1]``.
            distance: Raw edit distance.
            position: Start offset of the earliest best alignment.
            spans: Matched character ranges.
        """
        self.cost = cost
        self.distance = distance
        self.position = position
        self.spans = spans

    def __repr__(self) -> str:
        return (
            f"Match(cost={self.cost!r}, distance={self.distance!r}, "
            f"position={self.position!r}, spans={self.spans!r})"
        )


def max_distance(pattern_length: int, threshold: float) -> int:
    """Largest edit distance tolerated for a pattern of the given length.

    Args:
        pattern_length: Number of characters in the pattern.
        threshold: Fraction of the pattern allowed to differ.

    Returns:
        Maximum number of edits.
    """
    # Epsilon keeps 0.36 * 25 from flooring to 8.
    return int(threshold * pattern_length + 1e-9)


def _exact_positions(pattern: str, text: str) -> list[int]:
    """Start offsets of non-overlapping exact occurrences, leftmost first."""
    positions: list[int] = []
    start = text.find(pattern)
    while start != -1:
        positions.append(start)
        start = text.find(pattern, start + len(pattern))
    return positions


def _distance_table(pattern: str, text: str) -> list[list[int]]:
    """Build the edit distance table with a free start anywhere in text.

    ``table[i][j]`` is the smallest number of edits turning ``pattern[:i]``
    into some substring of ``text`` that ends at offset ``j``.
    """
    m, n = len(pattern), len(text)
    table = [[0] * (n + 1)]
    table.extend([i] + [0] * n for i in range(1, m + 1))

    for i in range(1, m + 1):
        pc = pattern[i - 1]
        row = table[i]
        above = table[i - 1]
        for j in range(1, n + 1):
            tc = text[j - 1]
            best = above[j - 1] + (pc != tc)
            if above[j] + 1 < best:
                best = above[j] + 1
            if row[j - 1] + 1 < best:
                best = row[j - 1] + 1
            if (
                i > 1
                and j > 1
                and pc != tc
                and pc == text[j - 2]
                and pattern[i - 2] == tc
                and table[i - 2][j - 2] + 1 < best
            ):
                best = table[i - 2][j - 2] + 1
            row[j] = best

    return table


def _trace(
    table: list[list[int]], pattern: str, text: str, end: int
) -> tuple[int, list[int]]:
    """Walk back from ``table[m][end]`` to recover one optimal alignment.

    Matches are preferred over edits, so the recovered alignment keeps as
    many pattern characters in place as possible.

    Returns:
        Tuple of (start offset, text offsets of matched characters).
    """
    i, j = len(pattern), end
    matched: list[int] = []

    while i > 0:
        here = table[i][j]
        if j > 0 and pattern[i - 1] == text[j - 1] and here == table[i - 1][j - 1]:
            matched.append(j - 1)
            i -= 1
            j -= 1
        elif (
            i > 1
            and j > 1
            and pattern[i - 1] != text[j - 1]
            and pattern[i - 1] == text[j - 2]
            and pattern[i - 2] == text[j - 1]
            and here == table[i - 2][j - 2] + 1
        ):
            # Swapped characters are still present in the text.
            matched.extend((j - 1, j - 2))
            i -= 2
            j -= 2
        elif j > 0 and here == table[i - 1][j - 1] + 1:
            i -= 1
            j -= 1
        elif here == table[i - 1][j] + 1:
            i -= 1
        else:
            j -= 1

    matched.reverse()
    return j, matched


def _runs(positions: list[int], min_length: int) -> list[tuple[int, int]]:
    """Collapse sorted offsets into consecutive runs of at least min_length."""
    runs: list[tuple[int, int]] = []
    if not positions:
        return runs

    start = prev = positions[0]
    for pos in positions[1:]:
        if pos == prev + 1:
            prev = pos
            continue
        if prev + 1 - start >= min_length:
            runs.append((start, prev + 1))
        start = prev = pos
    if prev + 1 - start >= min_length:
        runs.append((start, prev + 1))
    return runs


def find_match(
    pattern: str,
    text: str,
    threshold: float = DEFAULT_THRESHOLD,
    min_match_length: int = DEFAULT_MIN_MATCH_LENGTH,
) -> Match | None:
    """Approximately locate a normalized pattern inside normalized text.

    Every non-overlapping alignment that reaches the best distance
    contributes highlight spans; alignments are taken leftmost first.

    Args:
        pattern: Normalized, non-empty query.
        text: Normalized field text.
        threshold: Fraction of the pattern's characters allowed to differ.
        min_match_length: Shortest run of matched characters worth
            highlighting (capped at the pattern length).

    Returns:
        The match, or None when no alignment is within the threshold.

    Raises:
        ValueError: If the pattern is empty.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")

    m = len(pattern)
    min_run = min(min_match_length, m)

    exact = _exact_positions(pattern, text)
    if exact:
        return Match(
            cost=0.0,
            distance=0,
            position=exact[0],
            spans=[(start, start + m) for start in exact],
        )

    limit = max_distance(m, threshold)
    if limit == 0 or not text:
        return None

    table = _distance_table(pattern, text)
    last_row = table[m]
    best = min(last_row[1:])
    if best > limit:
        return None

    alignments: list[tuple[int, int, list[int]]] = []
    for end in range(1, len(text) + 1):
        if last_row[end] == best:
            start, matched = _trace(table, pattern, text, end)
            if matched:
                alignments.append((start, end, matched))
    if not alignments:
        return None

    alignments.sort(key=lambda a: (a[0], a[1]))
    spans: list[tuple[int, int]] = []
    taken_until = -1
    for start, end, matched in alignments:
        if start < taken_until:
            continue
        spans.extend(_runs(matched, min_run))
        taken_until = end

    return Match(
        cost=best / m,
        distance=best,
        position=alignments[0][0],
        spans=spans,
    )
