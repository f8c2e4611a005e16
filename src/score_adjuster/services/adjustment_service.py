"""
Score Adjustment Service - maps each item's in-year percentile onto the
baseline distribution.

Per item: percentile within its release year -> baseline score at that
percentile (lookup table) -> tail caps -> directional policy -> rounding.
Ranks are assigned after every item has been mapped.
"""
from dataclasses import dataclass, fields, replace

from score_adjuster.config import (
    setup_logger, DEFAULT_CONFIG, LookupConfig, OutputConfig, TailCapConfig
)
from score_adjuster.models import AdjustedItem, ScoredItem
from score_adjuster.utils import (
    estimate_percentile, percentile_of_value, round_half_up, score_from_lookup
)

logger = setup_logger(name="ScoreAdjustmentService")

# Percentile sources
COHORT = "cohort"
ESTIMATED = "estimated"
UNKNOWN = "unknown"


@dataclass(frozen=True)
class CohortPercentile:
    percentile: float
    source: str


class ScoreAdjustmentService:
    """Percentile mapper and score adjuster"""

    def __init__(self, config=DEFAULT_CONFIG):
        self.config = config
        self.caps = TailCapConfig()
        self.lookup_config = LookupConfig()
        self.output = OutputConfig()

    def percentile_in_cohort(self, item, cohort_stats) -> CohortPercentile:
        """
        Where the item sits within its release year.

        Real cohort statistics when the year has them, the estimator when
        the year is known but sparse, and the median when the year is unknown.
        """
        if item.start_year is None:
            return CohortPercentile(self.lookup_config.unknown_cohort_percentile, UNKNOWN)
        stats = cohort_stats.get(item.start_year)
        if stats is not None:
            return CohortPercentile(percentile_of_value(stats.scores, item.mean), COHORT)
        return CohortPercentile(estimate_percentile(item.mean), ESTIMATED)

    def apply_tail_caps(self, score, percentile, baseline) -> float:
        """Ceiling near the top of the distribution; never raises a score"""
        if percentile >= self.caps.max_cap_percentile:
            return min(score, baseline.cap_100)
        if percentile >= self.caps.upper_cap_percentile:
            return min(score, baseline.cap_95)
        return score

    def apply_direction_policy(self, score, original) -> float:
        """Inflation-only runs never let a score go up"""
        if self.config.allow_score_increases:
            return score
        return min(score, original)

    def adjust_item(self, item, cohort_stats, baseline):
        """
        Adjust one item.

        Returns:
            (AdjustedItem with rank 0, percentile source)
        """
        placement = self.percentile_in_cohort(item, cohort_stats)

        mapped = score_from_lookup(baseline.lookup, placement.percentile, baseline.scores)
        capped = self.apply_tail_caps(mapped, placement.percentile, baseline)
        final = self.apply_direction_policy(capped, item.mean)

        places = self.output.decimal_places
        adjusted = AdjustedItem(
            **{f.name: getattr(item, f.name) for f in fields(ScoredItem)},
            adjusted_score=round_half_up(final, places),
            adjusted_rank=0,
            score_difference=round_half_up(final - item.mean, places),
            percentile_in_year=round_half_up(placement.percentile, places),
        )
        return adjusted, placement.source

    @staticmethod
    def assign_ranks(adjusted_items) -> list:
        """
        Sort by adjusted score descending and number the result 1..N.
        Equal scores keep their input order.
        """
        ordered = sorted(adjusted_items, key=lambda item: -item.adjusted_score)
        return [
            replace(item, adjusted_rank=index + 1)
            for index, item in enumerate(ordered)
        ]

    def adjust(self, items, cohort_stats, baseline):
        """
        Adjust every item and rank the result.

        Parameters:
            items: Scored items (already filtered)
            cohort_stats: Dict of year -> CohortStatistics
            baseline: BaselineDistribution

        Returns:
            (ranked list of AdjustedItem, dict of percentile source -> count)
        """
        adjusted = []
        sources = {COHORT: 0, ESTIMATED: 0, UNKNOWN: 0}
        for item in items:
            adjusted_item, source = self.adjust_item(item, cohort_stats, baseline)
            adjusted.append(adjusted_item)
            sources[source] += 1

        ranked = self.assign_ranks(adjusted)
        logger.info(f"Calculated adjusted scores for {len(ranked)} items")
        return ranked, sources
