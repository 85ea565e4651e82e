"""Case folding and tokenization for searchable text."""

import re

_WHITESPACE = re.compile(r"\s+")


def fold(text: str) -> str:
    """Lowercase text without changing its length.

    Characters whose lowercase form expands to more than one code point
    are kept as-is so that offsets into the folded text stay valid for
    the original text.

    Args:
        text: Field or query text.

    Returns:
        Case-folded text of the same length as the input.
    """
    folded = text.lower()
    if len(folded) == len(text):
        return folded
    return "".join(c if len(c.lower()) != 1 else c.lower() for c in text)


def normalize_query(text: str) -> str:
    """Fold a raw query and trim surrounding whitespace.

    Returns an empty string for empty or whitespace-only queries.
    """
    return fold(text.strip())


def tokenize(text: str) -> list[str]:
    """Split text into whitespace-delimited words, keeping their casing."""
    return [word for word in _WHITESPACE.split(text) if word]
