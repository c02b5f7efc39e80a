"""Sub-scores combined by the ranker.

Both scorers are pure and deterministic. The expertise matcher uses
bidirectional substring containment, so short tags match inside longer
keywords ("it" matches "digital"). That looseness is part of the scoring
contract and existing scores depend on it.
"""

from collections.abc import Iterable, Sequence

# (minimum years, score), evaluated top-down
EXPERIENCE_BRACKETS: Sequence[tuple[int, float]] = (
    (15, 1.0),
    (10, 0.9),
    (7, 0.8),
    (5, 0.7),
    (3, 0.6),
    (1, 0.5),
)
BASE_EXPERIENCE_SCORE = 0.3


def expertise_match(expertise: Iterable[str], keywords: set[str]) -> float:
    """Fraction of project keywords covered by the consultant's expertise tags.

    Args:
        expertise: Declared expertise tags, any case.
        keywords: Normalized project keywords (see ``extract_keywords``).

    Returns:
        Score in [0, 1]; 0 when there are no keywords.
    """
    if not keywords:
        return 0.0

    tags = [tag.lower() for tag in expertise]
    matched = 0
    for keyword in keywords:
        for tag in tags:
            if keyword in tag or tag in keyword:
                matched += 1
                break

    return matched / len(keywords)


def experience_score(years: int) -> float:
    """Map years of experience to a score in [0.3, 1.0]."""
    for min_years, score in EXPERIENCE_BRACKETS:
        if years >= min_years:
            return score
    return BASE_EXPERIENCE_SCORE
