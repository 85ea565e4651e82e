"""Approximate matcher and normalizer tests."""

import pytest

from catalog.search.matcher import find_match, max_distance
from catalog.search.normalize import fold, normalize_query, tokenize


def test_fold_lowercases_ascii() -> None:
    """Folding lowercases ASCII letters."""
    assert fold("Beginner's Guide") == "beginner's guide"


def test_fold_preserves_length() -> None:
    """Folding never changes the string length."""
    text = "İstanbul Guide"
    assert len(fold(text)) == len(text)


def test_normalize_query_trims() -> None:
    """Query normalization strips surrounding whitespace."""
    assert normalize_query("  Street FOOD ") == "street food"
    assert normalize_query(" \t ") == ""


def test_tokenize_splits_on_whitespace() -> None:
    """Tokenizing splits on any run of whitespace."""
    assert tokenize("Photography:  Light & Mood") == [
        "Photography:",
        "Light",
        "&",
        "Mood",
    ]


def test_max_distance_scales_with_pattern_length() -> None:
    """Tolerated edits grow with the pattern length."""
    assert max_distance(2, 0.36) == 0
    assert max_distance(3, 0.36) == 1
    assert max_distance(9, 0.36) == 3
    assert max_distance(25, 0.36) == 9


def test_exact_substring_costs_zero() -> None:
    """An exact substring matches at cost 0."""
    match = find_match("guide", "beginner's guide to javascript")
    assert match is not None
    assert match.cost == 0.0
    assert match.position == 11
    assert match.spans == [(11, 16)]


def test_exact_match_highlights_every_occurrence() -> None:
    """Every exact occurrence is highlighted."""
    match = find_match("ab", "xabyab")
    assert match is not None
    assert match.spans == [(1, 3), (4, 6)]


def test_single_character_query_is_highlighted() -> None:
    """A one-character query still gets a highlight span."""
    match = find_match("a", "banana")
    assert match is not None
    assert match.spans == [(1, 2), (3, 4), (5, 6)]


def test_deleted_character_still_matches() -> None:
    """A missing character is tolerated as one edit."""
    match = find_match("javscript", "beginner's guide to javascript")
    assert match is not None
    assert match.distance == 1
    assert match.cost == pytest.approx(1 / 9)
    assert match.spans == [(20, 23), (24, 30)]


def test_transposition_counts_as_one_edit() -> None:
    """Swapped adjacent characters cost a single edit."""
    match = find_match("gudie", "street food guide")
    assert match is not None
    assert match.distance == 1
    assert match.cost == pytest.approx(0.2)
    assert match.spans == [(12, 17)]


def test_pattern_longer_than_text() -> None:
    """A pattern longer than the text can still match."""
    match = find_match("guides", "guide")
    assert match is not None
    assert match.distance == 1
    assert match.spans == [(0, 5)]


def test_equal_cost_alignments_prefer_earliest() -> None:
    """Ties between alignments resolve to the earliest one."""
    match = find_match("cat", "xcbt cet")
    assert match is not None
    assert match.cost == pytest.approx(1 / 3)
    assert match.position == 1


def test_non_overlapping_alignments_all_highlighted() -> None:
    """Each non-overlapping best alignment is highlighted."""
    match = find_match("guide", "guida guidx")
    assert match is not None
    assert match.cost == pytest.approx(0.2)
    assert match.spans == [(0, 4), (6, 10)]


def test_too_many_edits_is_rejected() -> None:
    """Matches over the threshold are rejected."""
    assert find_match("zzzz", "coffee") is None


def test_short_query_requires_exact_match() -> None:
    """Short queries tolerate no edits."""
    assert find_match("gx", "guide") is None


def test_threshold_widens_tolerance() -> None:
    """A higher threshold accepts more edits."""
    assert find_match("gxxde", "guide") is None
    match = find_match("gxxde", "guide", threshold=0.5)
    assert match is not None
    assert match.distance == 2


def test_empty_text_never_matches() -> None:
    """Nothing matches against empty text."""
    assert find_match("guide", "") is None


def test_empty_pattern_is_rejected() -> None:
    """An empty pattern raises ValueError."""
    with pytest.raises(ValueError):
        find_match("", "guide")
