"""
Normalization Service - orchestrates one percentile-based normalization run

Filters the input, builds per-year and baseline distributions, maps every
item onto the baseline and assembles the ranked result. All derived
structures belong to the run and are discarded with it.
"""
import time
import warnings

from score_adjuster.config import setup_logger, DEFAULT_CONFIG
from score_adjuster.exceptions import (
    ConfigurationError, EmptyInputError, InsufficientCohortDataWarning
)
from score_adjuster.models import NormalizationResult
from score_adjuster.services.adjustment_service import (
    ScoreAdjustmentService, ESTIMATED, UNKNOWN
)
from score_adjuster.services.baseline_service import BaselineService
from score_adjuster.services.cohort_service import CohortStatisticsService
from score_adjuster.services.summary_service import SummaryService

logger = setup_logger(name="NormalizationService")


class NormalizationService:
    """Runs the cohort -> baseline -> adjustment pipeline for one config"""

    def __init__(self, config=DEFAULT_CONFIG):
        self.config = config
        self.cohort_service = CohortStatisticsService(config)
        self.baseline_service = BaselineService(config)
        self.adjustment_service = ScoreAdjustmentService(config)
        self.summary_service = SummaryService()

    def filter_items(self, items) -> list:
        """Keep items scored by at least `min_scoring_users` users"""
        return [
            item for item in items
            if item.num_scoring_users >= self.config.min_scoring_users
        ]

    def _log_baseline(self, baseline):
        logger.info(f"Baseline sample size: {baseline.sample_size} items")
        logger.info(f"Baseline median: {baseline.median:.2f}")
        for p in (50, 75, 90, 95, 99):
            logger.info(f"  {p}th percentile: {baseline.percentiles[p]:.2f}")
        logger.info(f"  Max: {baseline.cap_100:.2f}")
        logger.info(
            f"Percentile caps: 95th={baseline.cap_95:.2f}, "
            f"99th={baseline.cap_99:.2f}, max={baseline.cap_100:.2f}"
        )

    def run(self, items) -> NormalizationResult:
        """
        Normalize a full, materialized item collection.

        Raises:
            EmptyInputError: no items, or none pass the scoring users filter
            ConfigurationError: the baseline period matched no items and
                degenerate baselines are not allowed
        """
        t_start = time.time()
        items = list(items)
        if not items:
            raise EmptyInputError("Item collection is empty")

        logger.info("=== Calculating Adjusted Scores (Dynamic Percentile System) ===")
        logger.info(f"Baseline Period: {self.config.baseline_period}")
        logger.info(f"Min Scoring Users: {self.config.min_scoring_users:,}")
        logger.info(
            "Allow Score Increases: "
            + ("YES (can correct deflation)" if self.config.allow_score_increases
               else "NO (only correct inflation)")
        )

        logger.info("[1/5] Filtering items by scoring users...")
        eligible = self.filter_items(items)
        excluded = len(items) - len(eligible)
        if not eligible:
            raise EmptyInputError(
                f"None of {len(items)} items has at least "
                f"{self.config.min_scoring_users} scoring users",
                detail={"total_items": len(items)},
            )
        logger.info(f"{len(eligible)} eligible, {excluded} excluded")

        logger.info("[2/5] Building release year statistics...")
        cohort_stats = self.cohort_service.build_cohort_stats(eligible)

        logger.info("[3/5] Building baseline distribution...")
        baseline = self.baseline_service.build_baseline(eligible)
        if baseline.degenerate and not self.config.allow_degenerate_baseline:
            raise ConfigurationError(
                f"Baseline period {self.config.baseline_period} contains no items",
                detail={"baseline_period": self.config.baseline_period},
            )
        self._log_baseline(baseline)

        logger.info("[4/5] Mapping items onto baseline...")
        ranked, sources = self.adjustment_service.adjust(eligible, cohort_stats, baseline)

        sparse = self.cohort_service.sparse_cohorts(eligible, cohort_stats)
        if sources[ESTIMATED]:
            message = (
                f"{sources[ESTIMATED]} items in {len(sparse)} release years with fewer than "
                f"{self.config.min_cohort_size} items were ranked with the percentile estimator"
            )
            logger.warning(message)
            warnings.warn(InsufficientCohortDataWarning(message), stacklevel=2)

        logger.info("[5/5] Summarizing...")
        summary = self.summary_service.summarize(ranked)

        logger.info(
            f"Completed normalization of {len(ranked)} items in {time.time() - t_start:.2f}s "
            f"(average difference {summary.average_difference:+.4f})"
        )
        return NormalizationResult(
            items=tuple(ranked),
            cohort_stats=cohort_stats,
            baseline=baseline,
            config=self.config,
            summary=summary,
            estimated_count=sources[ESTIMATED],
            unknown_cohort_count=sources[UNKNOWN],
            sparse_cohorts=tuple(sparse),
            excluded_count=excluded,
        )

    def cohort_trends(self, result):
        """Per-year median/mean/count and drift from the baseline median"""
        return self.cohort_service.summarize(result.cohort_stats, result.baseline.median)


def calculate_adjusted_scores(items, config=DEFAULT_CONFIG) -> NormalizationResult:
    """Normalize `items` with `config` in a single call"""
    return NormalizationService(config).run(items)
