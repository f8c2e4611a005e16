"""
Statistics Models

Per-run derived structures. Built fresh for every normalization run and
never shared between runs.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from score_adjuster.config import NormalizerConfig
from score_adjuster.models.items import AdjustedItem


@dataclass(frozen=True)
class CohortStatistics:
    """Score distribution of one release year"""
    year: int
    scores: Tuple[float, ...]
    median_score: float
    mean_score: float
    count: int
    percentiles: Dict[int, float] = field(default_factory=dict)


@dataclass(frozen=True)
class BaselineDistribution:
    """
    Reference distribution every cohort is mapped onto.

    Attributes:
        scores: Ascending scores of items in the baseline period
        median: Median of `scores`
        percentiles: Snapshot at 50/75/90/95/99/100
        lookup: Score at each 0.1 percentile step (1001 entries)
        degenerate: True when the period had no items and `scores`
            holds only the fallback score
    """
    scores: Tuple[float, ...]
    median: float
    percentiles: Dict[int, float]
    lookup: np.ndarray = field(repr=False, compare=False)
    degenerate: bool = False

    @property
    def sample_size(self) -> int:
        return 0 if self.degenerate else len(self.scores)

    @property
    def cap_95(self) -> float:
        return self.percentiles[95]

    @property
    def cap_99(self) -> float:
        return self.percentiles[99]

    @property
    def cap_100(self) -> float:
        return self.percentiles[100]


@dataclass(frozen=True)
class SummaryStatistics:
    """Run-wide averages and the largest individual moves"""
    total_items: int
    average_original: float
    average_adjusted: float
    average_difference: float
    biggest_decreases: List[AdjustedItem] = field(default_factory=list)
    biggest_increases: List[AdjustedItem] = field(default_factory=list)


@dataclass(frozen=True)
class NormalizationResult:
    """
    Output of one normalization run.

    Attributes:
        items: Adjusted items in adjusted-rank order
        cohort_stats: Materialized cohort statistics keyed by year
        baseline: Baseline distribution used for mapping
        config: Settings the run used
        summary: Averages and biggest moves
        estimated_count: Items ranked with the percentile estimator
        unknown_cohort_count: Items without a release year
        sparse_cohorts: Years too small for real cohort statistics
        excluded_count: Items dropped by the minimum scoring users filter
    """
    items: Tuple[AdjustedItem, ...]
    cohort_stats: Dict[int, CohortStatistics]
    baseline: BaselineDistribution
    config: NormalizerConfig
    summary: SummaryStatistics
    estimated_count: int = 0
    unknown_cohort_count: int = 0
    sparse_cohorts: Tuple[int, ...] = ()
    excluded_count: int = 0

    @property
    def baseline_degenerate(self) -> bool:
        return self.baseline.degenerate

    def by_id(self) -> Dict[int, AdjustedItem]:
        return {item.id: item for item in self.items}

    def get(self, item_id) -> Optional[AdjustedItem]:
        return self.by_id().get(item_id)

    def to_frame(self) -> pd.DataFrame:
        """Adjusted items as a DataFrame in rank order"""
        return pd.DataFrame([item.to_dict() for item in self.items])
