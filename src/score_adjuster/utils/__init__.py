from .percentile_utils import (
    round_half_up,
    median,
    percentile_of_value,
    value_at_percentile,
    estimate_percentile,
    percentile_snapshot,
    build_percentile_lookup,
    score_from_lookup,
)


__all__ = [
    "round_half_up",
    "median",
    "percentile_of_value",
    "value_at_percentile",
    "estimate_percentile",
    "percentile_snapshot",
    "build_percentile_lookup",
    "score_from_lookup",
]
