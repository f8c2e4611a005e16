class EstimatorConfig:
    """
    Piecewise-linear score -> percentile zones used for cohorts that are
    too small to rank against. Approximations, not fitted curves.

    Each zone is (score_floor, span, percentile_start, percentile_width):
    percentile = percentile_start + (score - score_floor) / span * percentile_width
    """
    top_zone: tuple = (8.5, 1.5, 85, 15)   # >= 8.5, no upper clamp
    zone5: tuple = (8.0, 0.5, 70, 15)      # 8.0-8.5
    zone4: tuple = (7.5, 0.5, 50, 20)      # 7.5-8.0
    zone3: tuple = (7.0, 0.5, 30, 20)      # 7.0-7.5
    zone2: tuple = (6.5, 0.5, 15, 15)      # 6.5-7.0
    bottom_zone: tuple = (0.0, 6.5, 0, 15)  # < 6.5, scaled from 0

    @property
    def zones(self):
        return [self.top_zone, self.zone5, self.zone4, self.zone3, self.zone2]


class TailCapConfig:
    """Percentile thresholds above which adjusted scores are capped"""
    max_cap_percentile: float = 99   # >= 99 -> capped at baseline maximum
    upper_cap_percentile: float = 95  # >= 95 -> capped at baseline p95


class LookupConfig:
    """Baseline percentile lookup table settings"""
    resolution: int = 10  # steps per percentile point -> 0.0, 0.1, ... 100.0
    snapshot_percentiles: tuple = (50, 75, 90, 95, 99, 100)
    fallback_baseline_score: float = 7.30
    unknown_cohort_percentile: float = 50.0

    @property
    def size(self) -> int:
        return 100 * self.resolution + 1


class OutputConfig:
    """Rounding and labelling of the adjusted output"""
    decimal_places: int = 2
    algorithm: str = "Percentile-based score normalization with hard caps"
    summary_top_n: int = 10
