"""
Item Models

Immutable input records and their adjusted counterparts.
"""
from dataclasses import dataclass, asdict
from typing import Optional


@dataclass(frozen=True)
class ScoredItem:
    """
    One rated title as supplied by the fetch/storage step.

    Attributes:
        id: Unique item identifier
        title: Display title
        mean: Average user score (0.0 - 10.0)
        rank: Original rank on the source site (ties allowed)
        start_year: Release year, None when unknown
        num_scoring_users: Number of users who scored the item
    """
    id: int
    title: str
    mean: float
    rank: int
    start_year: Optional[int]
    num_scoring_users: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class AdjustedItem(ScoredItem):
    """
    A ScoredItem mapped onto the baseline distribution.

    Attributes:
        adjusted_score: Score after percentile mapping, caps and policy
        adjusted_rank: 1-based position when sorted by adjusted score
        score_difference: adjusted_score - mean, rounded
        percentile_in_year: Percentile of the item within its release year
    """
    adjusted_score: float = 0.0
    adjusted_rank: int = 0
    score_difference: float = 0.0
    percentile_in_year: float = 0.0
