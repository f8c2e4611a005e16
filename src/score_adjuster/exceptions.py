"""Error taxonomy for a normalization run."""

__all__ = [
    "NormalizationError",
    "EmptyInputError",
    "ConfigurationError",
    "InsufficientCohortDataWarning",
]


class NormalizationError(Exception):
    """Base class for errors raised by a normalization run."""

    default_message = "Normalization failed"

    def __init__(self, message=None, *, detail=None):
        final_message = message or self.default_message
        super().__init__(final_message)
        self.message = final_message
        self.detail = detail


class EmptyInputError(NormalizationError, ValueError):
    """Raised when there is nothing to compute over."""

    default_message = "No scores to process"


class ConfigurationError(NormalizationError):
    """Raised for invalid settings or a baseline range with no matching items."""

    default_message = "Invalid normalizer configuration"


class InsufficientCohortDataWarning(UserWarning):
    """Some items were scored with the percentile estimator instead of real cohort data."""
