import pandas as pd

from score_adjuster.config import setup_logger, DEFAULT_CONFIG
from score_adjuster.models import CohortStatistics
from score_adjuster.utils import median, percentile_snapshot

logger = setup_logger(name="CohortStatisticsService")


def items_to_frame(items) -> pd.DataFrame:
    """Flatten scored items into a DataFrame keeping input order"""
    return pd.DataFrame(
        {
            'id': [item.id for item in items],
            'mean': [float(item.mean) for item in items],
            'start_year': pd.array([item.start_year for item in items], dtype="Int64"),
        }
    )


class CohortStatisticsService:
    """Groups items by release year and describes each year's score distribution"""

    def __init__(self, config=DEFAULT_CONFIG):
        self.config = config

    def build_cohort_stats(self, items) -> dict:
        """
        Per-year sorted scores and summary statistics.

        Items without a release year are skipped. Years with fewer than
        `min_cohort_size` items get no entry.

        Returns:
            Dict of year -> CohortStatistics
        """
        df = items_to_frame(items)
        stats_by_year = {}

        for year, group in df.groupby('start_year', sort=True, dropna=True):
            if len(group) < self.config.min_cohort_size:
                continue
            scores = tuple(sorted(group['mean'].tolist()))
            stats_by_year[int(year)] = CohortStatistics(
                year=int(year),
                scores=scores,
                median_score=median(scores),
                mean_score=float(group['mean'].mean()),
                count=len(scores),
                percentiles=percentile_snapshot(scores),
            )

        logger.info(f"Built statistics for {len(stats_by_year)} release years")
        return stats_by_year

    def sparse_cohorts(self, items, cohort_stats) -> list:
        """Release years present in the items but too small for statistics"""
        years = {item.start_year for item in items if item.start_year is not None}
        return sorted(years - set(cohort_stats))

    @staticmethod
    def summarize(cohort_stats, baseline_median) -> pd.DataFrame:
        """
        Score trend by year.

        `adjustment` is the baseline median minus the year's median, a
        display-only indicator of how far a year drifted.
        """
        rows = [
            {
                'year': stats.year,
                'median': stats.median_score,
                'mean': stats.mean_score,
                'count': stats.count,
                'adjustment': baseline_median - stats.median_score,
            }
            for stats in sorted(cohort_stats.values(), key=lambda s: s.year)
        ]
        return pd.DataFrame(rows, columns=['year', 'median', 'mean', 'count', 'adjustment'])
