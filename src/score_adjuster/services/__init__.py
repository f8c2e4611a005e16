from .cohort_service import CohortStatisticsService
from .baseline_service import BaselineService
from .adjustment_service import ScoreAdjustmentService
from .summary_service import SummaryService
from .normalization_service import NormalizationService, calculate_adjusted_scores
from .export_service import ExportService


__all__ = [
    "CohortStatisticsService",
    "BaselineService",
    "ScoreAdjustmentService",
    "SummaryService",
    "NormalizationService",
    "calculate_adjusted_scores",
    "ExportService",
]
