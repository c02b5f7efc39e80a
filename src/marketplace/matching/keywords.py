"""Keyword extraction from free-text project fields."""

import re

_NON_WORD = re.compile(r"[^\w\s]")

MIN_KEYWORD_LENGTH = 4


def extract_keywords(text: str) -> set[str]:
    """Tokenize text into a set of normalized keywords.

    Lowercases, strips everything that is not a word character or
    whitespace, splits on whitespace runs and keeps tokens of at least
    four characters.

    >>> sorted(extract_keywords("Reduce carbon footprint, in 2025!"))
    ['2025', 'carbon', 'footprint', 'reduce']
    """
    cleaned = _NON_WORD.sub("", text.lower())
    return {token for token in cleaned.split() if len(token) >= MIN_KEYWORD_LENGTH}
