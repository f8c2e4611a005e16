"""
Percentile-based score normalization.

Maps each item's percentile within its release year onto a baseline
period's score distribution so scores from different years compare on
one standard.
"""
from .config import NormalizerConfig, DEFAULT_CONFIG, create_config
from .exceptions import (
    NormalizationError, EmptyInputError, ConfigurationError, InsufficientCohortDataWarning
)
from .models import ScoredItem, AdjustedItem, NormalizationResult
from .services import NormalizationService, ExportService, calculate_adjusted_scores

__version__ = "0.1.0"

__all__ = [
    "NormalizerConfig",
    "DEFAULT_CONFIG",
    "create_config",
    "NormalizationError",
    "EmptyInputError",
    "ConfigurationError",
    "InsufficientCohortDataWarning",
    "ScoredItem",
    "AdjustedItem",
    "NormalizationResult",
    "NormalizationService",
    "ExportService",
    "calculate_adjusted_scores",
]
