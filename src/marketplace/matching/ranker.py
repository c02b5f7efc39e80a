"""Match ranking: weighted scoring, threshold, ordering and truncation."""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol
from uuid import UUID

from src.marketplace.matching.keywords import extract_keywords
from src.marketplace.matching.scoring import experience_score, expertise_match

EXPERTISE_WEIGHT = 0.6
EXPERIENCE_WEIGHT = 0.4
MIN_MATCH_SCORE = 0.30
MAX_CANDIDATES = 10

_TWO_PLACES = Decimal("0.01")


class Candidate(Protocol):
    """Attributes of a consultant the ranker reads."""

    id: UUID
    expertise: list[str]
    experience_years: int


class MatchableProject(Protocol):
    @property
    def matching_text(self) -> str: ...


@dataclass(frozen=True)
class RankedCandidate:
    """A consultant retained for a project, with its persisted score."""

    consultant_id: UUID
    score: float


def round_score(value: float) -> float:
    """Round half-up to two decimal places."""
    return float(Decimal(repr(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def combined_score(expertise: Iterable[str], years: int, keywords: set[str]) -> float:
    """Weighted sum of the expertise and experience sub-scores."""
    return (
        EXPERTISE_WEIGHT * expertise_match(expertise, keywords)
        + EXPERIENCE_WEIGHT * experience_score(years)
    )


def rank_matches(
    project: MatchableProject,
    pool: Iterable[Candidate],
    min_score: float = MIN_MATCH_SCORE,
    limit: int = MAX_CANDIDATES,
) -> list[RankedCandidate]:
    """Rank the consultant pool against a project.

    Consultants whose combined score is below ``min_score`` are dropped.
    The rest are ordered by combined score, highest first; ``sorted`` is
    stable so equal scores keep pool order. Only the first ``limit`` are
    returned, with scores rounded to two decimals.

    Args:
        project: The project being matched; only its text fields are read.
        pool: Candidate consultants, in the order the store returned them.
        min_score: Inclusive lower bound on the unrounded combined score.
        limit: Maximum number of candidates returned.

    Returns:
        Ranked candidates, at most ``limit`` of them.
    """
    keywords = extract_keywords(project.matching_text)

    scored: list[tuple[float, UUID]] = []
    for consultant in pool:
        score = combined_score(consultant.expertise, consultant.experience_years, keywords)
        if score >= min_score:
            scored.append((score, consultant.id))

    ranked = sorted(scored, key=lambda item: item[0], reverse=True)
    return [
        RankedCandidate(consultant_id=consultant_id, score=round_score(score))
        for score, consultant_id in ranked[:limit]
    ]
