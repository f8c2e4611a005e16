import math

import numpy as np

from score_adjuster.config import EstimatorConfig, LookupConfig
from score_adjuster.exceptions import EmptyInputError


def round_half_up(value: float, places: int = 2) -> float:
    """Round to `places` decimals with halves going up (7.125 -> 7.13)"""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def median(scores) -> float:
    """
    Middle value of the scores, or the mean of the two central values
    for an even count. Input order does not matter.

    Raises:
        EmptyInputError: if scores is empty
    """
    ordered = sorted(scores)
    n = len(ordered)
    if n == 0:
        raise EmptyInputError("Cannot take the median of an empty score list")
    mid = n // 2
    if n % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


def percentile_of_value(sorted_scores, value: float) -> float:
    """
    Percentage of scores strictly below `value`.

    Formula: P = C_below / N * 100

    `sorted_scores` must be ascending. Ties count as not-below, so the
    minimum of a set sits at percentile 0.
    """
    n = len(sorted_scores)
    if n == 0:
        raise EmptyInputError("Cannot rank against an empty score list")
    below = int(np.searchsorted(sorted_scores, value, side="left"))
    return below / n * 100


def value_at_percentile(sorted_scores, percentile: float) -> float:
    """
    Score at `percentile` of an ascending array, linearly interpolated
    between the two nearest ranks. The percentile is clamped to [0, 100]
    before the position is computed.
    """
    n = len(sorted_scores)
    if n == 0:
        raise EmptyInputError("Cannot interpolate over an empty score list")

    percentile = max(0.0, min(100.0, percentile))
    position = percentile / 100 * (n - 1)
    lower = math.floor(position)
    upper = math.ceil(position)

    if lower == upper or upper >= n:
        return float(sorted_scores[lower])

    weight = position - lower
    return float(sorted_scores[lower] * (1 - weight) + sorted_scores[upper] * weight)


def estimate_percentile(score: float) -> float:
    """
    Rough percentile for a score whose cohort is too small to rank against.
    Scores above the top zone are not clamped to 100.
    """
    cfg = EstimatorConfig()
    for floor, span, start, width in cfg.zones:
        if score >= floor:
            return start + ((score - floor) / span) * width
    floor, span, start, width = cfg.bottom_zone
    return start + ((score - floor) / span) * width


def percentile_snapshot(sorted_scores) -> dict:
    """Scores at the diagnostic percentiles (50/75/90/95/99) plus the maximum"""
    snapshot = {}
    for p in LookupConfig.snapshot_percentiles:
        if p == 100:
            snapshot[p] = float(sorted_scores[-1])
        else:
            snapshot[p] = value_at_percentile(sorted_scores, p)
    return snapshot


def build_percentile_lookup(sorted_scores) -> np.ndarray:
    """
    Precompute the score at every 0.1 percentile step (0.0 .. 100.0).
    Index i holds the score at percentile i / 10; always 1001 entries.
    """
    cfg = LookupConfig()
    return np.array([
        value_at_percentile(sorted_scores, step / cfg.resolution)
        for step in range(cfg.size)
    ])


def score_from_lookup(lookup: np.ndarray, percentile: float, fallback_scores) -> float:
    """
    Score for `percentile` from the precomputed table, rounded to the
    nearest 0.1 step. Off-grid queries interpolate directly.
    """
    index = math.floor(percentile * LookupConfig.resolution + 0.5)
    if 0 <= index < len(lookup):
        return float(lookup[index])
    return value_at_percentile(fallback_scores, percentile)
