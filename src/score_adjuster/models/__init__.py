from .items import ScoredItem, AdjustedItem
from .statistics import (
    CohortStatistics, BaselineDistribution, SummaryStatistics, NormalizationResult
)


__all__ = [
    "ScoredItem",
    "AdjustedItem",
    "CohortStatistics",
    "BaselineDistribution",
    "SummaryStatistics",
    "NormalizationResult",
]
