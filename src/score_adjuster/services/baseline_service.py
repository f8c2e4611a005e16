from score_adjuster.config import setup_logger, DEFAULT_CONFIG, LookupConfig
from score_adjuster.models import BaselineDistribution
from score_adjuster.utils import median, percentile_snapshot, build_percentile_lookup

logger = setup_logger(name="BaselineService")


class BaselineService:
    """Builds the reference score distribution and its percentile lookup table"""

    def __init__(self, config=DEFAULT_CONFIG):
        self.config = config
        self.lookup_config = LookupConfig()

    def collect_scores(self, items) -> list:
        """Ascending scores of items released inside the baseline period"""
        return sorted(item.mean for item in items if self.config.in_baseline(item.start_year))

    def build_baseline(self, items) -> BaselineDistribution:
        """
        Sorted baseline scores, median, percentile snapshot and the
        0.1-step lookup table.

        An empty baseline period does not raise here: the distribution is
        built from the fallback score alone and flagged `degenerate`.
        """
        scores = self.collect_scores(items)
        degenerate = not scores

        if degenerate:
            logger.error(
                f"No items found in baseline period {self.config.baseline_period}; "
                f"falling back to constant score {self.lookup_config.fallback_baseline_score:.2f}"
            )
            scores = [self.lookup_config.fallback_baseline_score]

        scores = tuple(scores)
        lookup = build_percentile_lookup(scores)
        logger.info(f"Created lookup table with {len(lookup)} entries")

        return BaselineDistribution(
            scores=scores,
            median=median(scores),
            percentiles=percentile_snapshot(scores),
            lookup=lookup,
            degenerate=degenerate,
        )
