"""Project-to-consultant matching engine."""

from src.marketplace.matching.keywords import extract_keywords
from src.marketplace.matching.ranker import RankedCandidate, rank_matches
from src.marketplace.matching.scoring import experience_score, expertise_match

__all__ = [
    "RankedCandidate",
    "experience_score",
    "expertise_match",
    "extract_keywords",
    "rank_matches",
]
