from score_adjuster.config import OutputConfig
from score_adjuster.models import SummaryStatistics


class SummaryService:
    """Run-wide averages and the biggest score moves"""

    def __init__(self, top_n=None):
        self.top_n = top_n or OutputConfig.summary_top_n

    def summarize(self, adjusted_items) -> SummaryStatistics:
        """
        Parameters:
            adjusted_items: AdjustedItems in rank order (non-empty)

        Returns:
            SummaryStatistics with the top-N decreases (most inflated)
            and increases (most deflated)
        """
        total = len(adjusted_items)
        average_original = sum(item.mean for item in adjusted_items) / total
        average_adjusted = sum(item.adjusted_score for item in adjusted_items) / total

        decreases = sorted(adjusted_items, key=lambda item: item.score_difference)
        increases = sorted(adjusted_items, key=lambda item: -item.score_difference)

        return SummaryStatistics(
            total_items=total,
            average_original=average_original,
            average_adjusted=average_adjusted,
            average_difference=average_adjusted - average_original,
            biggest_decreases=decreases[:self.top_n],
            biggest_increases=increases[:self.top_n],
        )
