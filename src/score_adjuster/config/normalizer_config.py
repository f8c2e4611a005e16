"""
Normalizer Configuration

Immutable run settings. Every field can be overridden through the
environment so thresholds and the baseline period change without code edits.
"""
import os
from dataclasses import dataclass, replace

from score_adjuster.exceptions import ConfigurationError

ENV_PREFIX = "SCORE_ADJUSTER_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class NormalizerConfig:
    """
    Settings for one normalization run.

    Attributes:
        min_scoring_users: Items rated by fewer users are left out entirely
        min_cohort_size: Smallest cohort ranked against its own scores
        baseline_start_year: First release year of the reference period
        baseline_end_year: Last release year of the reference period (inclusive)
        allow_score_increases: False = inflation-only, True = bidirectional
        allow_degenerate_baseline: Run on the fallback score when the
            reference period has no items instead of failing
    """
    min_scoring_users: int = 17500
    min_cohort_size: int = 10
    baseline_start_year: int = 2010
    baseline_end_year: int = 2010
    allow_score_increases: bool = False
    allow_degenerate_baseline: bool = False

    def __post_init__(self):
        if self.min_scoring_users < 0:
            raise ConfigurationError(
                f"min_scoring_users must be >= 0, got {self.min_scoring_users}")
        if self.min_cohort_size < 1:
            raise ConfigurationError(
                f"min_cohort_size must be >= 1, got {self.min_cohort_size}")
        if self.baseline_start_year > self.baseline_end_year:
            raise ConfigurationError(
                f"Baseline start year {self.baseline_start_year} is after "
                f"end year {self.baseline_end_year}")

    @property
    def baseline_period(self) -> str:
        return f"{self.baseline_start_year}-{self.baseline_end_year}"

    def in_baseline(self, year) -> bool:
        return year is not None and self.baseline_start_year <= year <= self.baseline_end_year

    def with_overrides(self, **overrides) -> "NormalizerConfig":
        return replace(self, **overrides)

    @classmethod
    def from_env(cls, environ=None) -> "NormalizerConfig":
        """
        Build a config from SCORE_ADJUSTER_* environment variables.
        Unset variables keep their defaults.
        """
        environ = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            min_scoring_users=_env_int(environ, "MIN_SCORING_USERS", defaults.min_scoring_users),
            min_cohort_size=_env_int(environ, "MIN_COHORT_SIZE", defaults.min_cohort_size),
            baseline_start_year=_env_int(environ, "BASELINE_START_YEAR", defaults.baseline_start_year),
            baseline_end_year=_env_int(environ, "BASELINE_END_YEAR", defaults.baseline_end_year),
            allow_score_increases=_env_bool(
                environ, "ALLOW_SCORE_INCREASES", defaults.allow_score_increases),
            allow_degenerate_baseline=_env_bool(
                environ, "ALLOW_DEGENERATE_BASELINE", defaults.allow_degenerate_baseline),
        )


def _env_int(environ, key, default):
    raw = environ.get(ENV_PREFIX + key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.replace("_", "").replace(",", ""))
    except ValueError as e:
        raise ConfigurationError(f"{ENV_PREFIX}{key} must be an integer, got {raw!r}") from e


def _env_bool(environ, key, default):
    raw = environ.get(ENV_PREFIX + key)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{ENV_PREFIX}{key} must be a boolean, got {raw!r}")


DEFAULT_CONFIG = NormalizerConfig()


def create_config(baseline_start_year, baseline_end_year, min_scoring_users=17500, **overrides):
    """Shorthand for a config with a custom baseline period."""
    return NormalizerConfig(
        min_scoring_users=min_scoring_users,
        baseline_start_year=baseline_start_year,
        baseline_end_year=baseline_end_year,
        **overrides
    )
